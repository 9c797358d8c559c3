"""
Locale-aware collation.

The collation locale (LC_COLLATE) is process-wide state, so switching it is
serialized with a lock and always restored afterwards.
"""

import locale
import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Union

logger = logging.getLogger("lexis.strings")

_collation_lock = threading.RLock()


def _candidates(locales: Union[str, Iterable[str]]) -> list[str]:
    if isinstance(locales, str):
        return [locales]
    return list(locales)


@contextmanager
def collation_locale(locales: Union[str, Iterable[str]]) -> Iterator[Optional[str]]:
    """
    Temporarily switch LC_COLLATE to the first locale that can be set.

    Args:
        locales: A locale name or candidate names tried in order
            (e.g. ["fr_FR.UTF-8", "fr_FR.utf8", "French_France"])

    Yields:
        The locale that was set, or None when none was available (the
        current collation locale stays active)

    Examples:
        >>> with collation_locale(["fr_FR.UTF-8", "fr_FR"]) as active:
        ...     locale.strcoll("é", "f")
    """
    with _collation_lock:
        previous = locale.setlocale(locale.LC_COLLATE)
        active = None
        for candidate in _candidates(locales):
            try:
                active = locale.setlocale(locale.LC_COLLATE, candidate)
                break
            except locale.Error:
                continue

        if active is None:
            logger.debug(f"No collation locale available from {locales!r}, keeping {previous!r}")

        try:
            yield active
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)


def collate(first: str, second: str, locales: Union[str, Iterable[str]]) -> int:
    """Compare two strings under the given collation locale; returns -1, 0 or 1."""
    with collation_locale(locales):
        return _sign(locale.strcoll(first, second))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
