"""
Naming-convention normalization.

Converts identifiers between camelCase, space-, dash- and
underscore-separated forms, using Unicode codepoint classes to find word
boundaries.
"""

from .core import (
    from_camel_case,
    to_camel_case,
    to_dash_separated,
    to_key,
    to_space_separated,
    to_underscore_separated,
    to_variable,
)
from .parsers import camel_boundaries, classify, split_words

__all__ = [
    "from_camel_case",
    "to_camel_case",
    "to_dash_separated",
    "to_space_separated",
    "to_underscore_separated",
    "to_variable",
    "to_key",
    "classify",
    "camel_boundaries",
    "split_words",
]
