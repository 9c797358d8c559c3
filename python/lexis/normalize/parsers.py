"""
Codepoint classification and camelCase boundary detection.
"""

import unicodedata

UPPER = "upper"
LOWER = "lower"
DIGIT = "digit"
OTHER = "other"


def classify(char: str) -> str:
    """
    Classify a single codepoint by its Unicode general category.

    Returns:
        "upper" (Lu, Lt), "lower" (Ll), "digit" (Nd) or "other"

    Examples:
        >>> classify("Ж")
        'upper'
        >>> classify("é")
        'lower'
        >>> classify("_")
        'other'
    """
    category = unicodedata.category(char)
    if category in ("Lu", "Lt"):
        return UPPER
    if category == "Ll":
        return LOWER
    if category == "Nd":
        return DIGIT
    return OTHER


def camel_boundaries(text: str) -> list[int]:
    """
    Find the indexes where a camelCase identifier splits into words.

    A boundary sits before index i when:
    - text[i] is uppercase and text[i-1] is neither uppercase nor "_"
      ("fooBar" -> foo|Bar, "J001Foo" -> J001|Foo)
    - text[i-1] and text[i] are uppercase and text[i+1] exists and is
      neither uppercase nor "_" ("ABCDef" -> ABC|Def)

    Underscores never split and block both rules, which is why
    "ThisIsA_NASAAstronaut" keeps "A_NASA" together.

    Args:
        text: Identifier to scan

    Returns:
        Sorted list of split indexes (never 0)
    """
    classes = [classify(c) for c in text]
    boundaries = []

    for i in range(1, len(text)):
        prev_upper = classes[i - 1] == UPPER
        if classes[i] != UPPER:
            continue

        if not prev_upper and text[i - 1] != "_":
            boundaries.append(i)
        elif prev_upper and i + 1 < len(text):
            nxt = i + 1
            if classes[nxt] != UPPER and text[nxt] != "_":
                boundaries.append(i)

    return boundaries


def split_words(text: str) -> list[str]:
    """
    Split a camelCase / PascalCase identifier into its words.

    Examples:
        >>> split_words("FooBarABCDef")
        ['Foo', 'Bar', 'ABC', 'Def']
        >>> split_words("J001FooBar002")
        ['J001', 'Foo', 'Bar002']
        >>> split_words("abc_defGhi_Jkl")
        ['abc_def', 'Ghi_Jkl']

    Edge Cases:
        - Empty string: [""]
        - No boundaries: "foobar" -> ["foobar"]
    """
    words = []
    start = 0
    for index in camel_boundaries(text):
        words.append(text[start:index])
        start = index
    words.append(text[start:])
    return words


def lower_upper_boundaries(text: str) -> list[int]:
    """Indexes where a lowercase codepoint is directly followed by an uppercase one."""
    return [
        i
        for i in range(1, len(text))
        if classify(text[i - 1]) == LOWER and classify(text[i]) == UPPER
    ]
