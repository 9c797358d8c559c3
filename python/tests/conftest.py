"""
Pytest configuration and fixtures for lexis tests.

Every test that touches the inflector gets its own instance so rule
additions never leak between tests. The process-wide instance is reset
around each test for the same reason.
"""

import pytest
from pathlib import Path


@pytest.fixture
def inflector():
    """A fresh inflector seeded with the default English rules."""
    from lexis.inflection import get_instance

    return get_instance(new=True)


@pytest.fixture(autouse=True)
def reset_shared_inflector(monkeypatch):
    """Drop the process-wide inflector and lexis env vars so get_instance() rebuilds it per test."""
    import lexis.inflection.inflector as inflector_module

    monkeypatch.setattr(inflector_module, "_instance", None)
    for name in ("LEXIS_RULES_FILE", "LEXIS_LOG_DIR", "LEXIS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def rule_file(tmp_path):
    """Write a YAML rule file and return its path."""
    def _create_file(content: str, name: str = "rules.yaml") -> Path:
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file


@pytest.fixture
def clean_lexis_logger():
    """Remove handlers added by setup_logging() so each test starts clean."""
    import logging

    logger = logging.getLogger("lexis")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(original_level)
