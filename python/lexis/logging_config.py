"""
Logging configuration for lexis.

lexis is a library, so importing it configures nothing: the package only
attaches a NullHandler to the "lexis" logger. File logging is switched on
either explicitly with setup_logging(), or by setting LEXIS_LOG_DIR, in
which case the process-wide inflector (inflection.get_instance) sets it up
when it is first built. That way rule-file loads and rule registrations
show up in the log.

Logs go to <log_dir>/lexis-YYYY-MM-DD.log (new file each day).

Environment:
    LEXIS_LOG_DIR: directory for the log file; enables logging for the
        shared inflector
    LEXIS_LOG_LEVEL: level name or number (default: INFO)
"""

import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "lexis"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class RuleLogHandler(logging.handlers.TimedRotatingFileHandler):
    """Daily-rotating lexis log file, flushed after every record."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def resolve_level(value: Union[None, int, str] = None) -> int:
    """
    Turn a level name or number into a logging level.

    Args:
        value: Level name ("debug", "WARNING"), number, or None to read
            LEXIS_LOG_LEVEL

    Returns:
        The level; INFO when value is empty or not a known level name
    """
    if value is None:
        value = os.environ.get("LEXIS_LOG_LEVEL", "")
    if isinstance(value, int):
        return value

    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper()) if value else None
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[None, int, str] = None,
    backup_count: int = 7,
) -> logging.Logger:
    """
    Send the "lexis" logger to a daily log file.

    Calling it again keeps the existing file handler and only updates the
    level.

    Args:
        log_dir: Directory for log files (default: LEXIS_LOG_DIR, else .lexis/logs)
        level: Level name or number (default: LEXIS_LOG_LEVEL, else INFO)
        backup_count: Number of daily files to keep

    Returns:
        The "lexis" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    if find_file_handler(logger) is not None:
        return logger

    if log_dir is None:
        log_dir = Path(os.environ.get("LEXIS_LOG_DIR") or Path.cwd() / ".lexis" / "logs")
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"lexis-{datetime.now().strftime('%Y-%m-%d')}.log"
    handler = RuleLogHandler(
        log_file,
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    logger.info(f"lexis logging to {log_file} at {logging.getLevelName(logger.level)}")
    return logger


def find_file_handler(logger: logging.Logger) -> Optional[RuleLogHandler]:
    """The lexis file handler already attached to logger, if any."""
    for handler in logger.handlers:
        if isinstance(handler, RuleLogHandler):
            return handler
    return None


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the lexis namespace."""
    return logging.getLogger(name)
