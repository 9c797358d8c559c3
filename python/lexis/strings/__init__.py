"""
UTF-8 string helpers.

- utf8: codepoint-safe primitives (substr, strpos, str_pad, trim, transcode, ...)
- collation: temporary LC_COLLATE switching
- helper: increment, strcmp, strcasecmp
"""

from .collation import collate, collation_locale
from .helper import increment, strcasecmp, strcmp
from . import utf8

__all__ = [
    "collate",
    "collation_locale",
    "increment",
    "strcasecmp",
    "strcmp",
    "utf8",
]
