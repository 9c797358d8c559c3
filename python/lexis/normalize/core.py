"""
Conversions between word-separator conventions.

All functions are pure: they take a string and return a new one, and
re-applying a conversion to its own output changes nothing.
"""

import re
from typing import Union

from ..strings.utf8 import lcfirst, ucwords
from .parsers import lower_upper_boundaries, split_words

# Any run of spaces, dashes and underscores counts as one delimiter
DELIMITERS = re.compile(r"[ \-_]+")
LEADING_DIGITS = re.compile(r"^\d+")


def from_camel_case(text: str, grouped: bool = False) -> Union[str, list[str]]:
    """
    Split a camelCase / PascalCase identifier.

    Args:
        text: Identifier to split
        grouped: Return the list of words instead of a single string

    Returns:
        grouped=False: text with a space inserted at each lowercase ->
        uppercase transition ("fooBar" -> "foo Bar"). Acronym runs are left
        alone ("FooBarABC" -> "Foo BarABC"), and so are digit -> uppercase
        transitions ("J001FooBar" -> "J001Foo Bar", where the grouped form
        gives ["J001", "Foo", "Bar"]).
        grouped=True: list of words, acronym-aware (see parsers.camel_boundaries)

    Examples:
        >>> from_camel_case("FooBar")
        'Foo Bar'
        >>> from_camel_case("FooBarABCDef", grouped=True)
        ['Foo', 'Bar', 'ABC', 'Def']
        >>> from_camel_case("ThisIsA_NASAAstronaut", grouped=True)
        ['This', 'Is', 'A_NASA', 'Astronaut']
    """
    if grouped:
        return split_words(text)

    parts = []
    start = 0
    for index in lower_upper_boundaries(text):
        parts.append(text[start:index])
        start = index
    parts.append(text[start:])
    return " ".join(parts)


def to_camel_case(text: str) -> str:
    """
    Join delimited words into CamelCase.

    The first letter of every word is uppercased; the rest of each word keeps
    its case ("foo-barBaz" -> "FooBarBaz").

    Examples:
        >>> to_camel_case("foo_bar")
        'FooBar'
    """
    return ucwords(to_space_separated(text)).replace(" ", "")


def to_dash_separated(text: str) -> str:
    """
    Examples:
        >>> to_dash_separated("foo___bar")
        'foo-bar'
    """
    return DELIMITERS.sub("-", text)


def to_space_separated(text: str) -> str:
    """
    Examples:
        >>> to_space_separated("Foo_Bar")
        'Foo Bar'
    """
    return DELIMITERS.sub(" ", text)


def to_underscore_separated(text: str) -> str:
    """
    Examples:
        >>> to_underscore_separated("foo   bar")
        'foo_bar'
    """
    return DELIMITERS.sub("_", text)


def to_variable(text: str) -> str:
    """
    Convert text to a variable name: camelCase with a lowercase first letter.

    Leading digits are dropped since identifiers cannot start with one.

    Examples:
        >>> to_variable("My Foo-Bar")
        'myFooBar'
        >>> to_variable("1abc3def4")
        'abc3def4'
    """
    text = to_camel_case(text)
    text = LEADING_DIGITS.sub("", text)
    return lcfirst(text)


def to_key(text: str) -> str:
    """
    Convert text to a lowercase, underscore-separated key.

    Examples:
        >>> to_key("Foo Bar")
        'foo_bar'
    """
    return to_underscore_separated(text).lower()
