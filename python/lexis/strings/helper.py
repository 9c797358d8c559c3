"""
String helpers built on the UTF-8 primitives: label incrementing and
(optionally locale-aware) comparison.
"""

import re
from typing import Iterable, Optional, Union

from .collation import collate

# style -> (search, replace) patterns and (new, existing) formats.
# "default" appends " (2)" but rewrites an existing "(N)" in place.
INCREMENT_STYLES = {
    "dash": {
        "regexp": (re.compile(r"-(\d+)$"), re.compile(r"-(\d+)$")),
        "format": ("-{}", "-{}"),
    },
    "default": {
        "regexp": (re.compile(r"\((\d+)\)$"), re.compile(r"\(\d+\)$")),
        "format": (" ({})", "({})"),
    },
}


def increment(text: str, style: Optional[str] = "default", n: int = 0) -> str:
    """
    Increment a trailing number in a string.

    Used to make distinct labels when copying things:
    default: "Label" -> "Label (2)", "Label (2)" -> "Label (3)"
    dash:    "Label" -> "Label-2",   "Label-2" -> "Label-3"

    Args:
        text: Source string
        style: "default" or "dash"; anything else (None included) means default
        n: Use this number when positive, otherwise the next number

    Examples:
        >>> increment("title", None, 0)
        'title (2)'
        >>> increment("title(2)", None, 0)
        'title(3)'
    """
    patterns = INCREMENT_STYLES.get(style or "default", INCREMENT_STYLES["default"])
    search, replace = patterns["regexp"]
    new_format, old_format = patterns["format"]

    match = search.search(text)
    if match:
        number = n if n and n > 0 else int(match.group(1)) + 1
        return replace.sub(lambda _m: old_format.format(number), text, count=1)

    return text + new_format.format(n if n and n > 0 else 2)


def strcmp(first: str, second: str, locale: Union[None, str, Iterable[str]] = None) -> int:
    """
    Case-sensitive comparison.

    Args:
        first: First string
        second: Second string
        locale: Locale name(s) for collation-aware comparison; None compares
            codepoints

    Returns:
        -1, 0 or 1
    """
    if not locale:
        return (first > second) - (first < second)
    return collate(first, second, locale)


def strcasecmp(first: str, second: str, locale: Union[None, str, Iterable[str]] = None) -> int:
    """
    Case-insensitive comparison.

    Both strings are lowercased before comparing, with or without a locale.
    """
    first = first.lower()
    second = second.lower()
    if not locale:
        return (first > second) - (first < second)
    return collate(first, second, locale)
