"""
Codepoint-safe string primitives.

Python strings are already sequences of Unicode codepoints, so these are
thin helpers over str, codecs and unicodedata that keep the offset/length
conventions of the classic str* function family:

- negative offsets count from the end of the string
- a negative length stops that many codepoints short of the end
- a search miss returns None (callers must check before using the offset)

Byte input is only accepted where bytes make sense (valid, transcode).
"""

import builtins
import codecs
import re
import unicodedata
from typing import Optional, Union

from ..errors import InvalidArgumentError

STR_PAD_LEFT = 0
STR_PAD_RIGHT = 1
STR_PAD_BOTH = 2

# Default characters stripped by the trim family
WHITESPACE = " \t\n\r\0\x0B"

# Characters that start a new word for ucwords()
WORD_DELIMITERS = " \t\r\n\f\v"

TRANSLIT_ERRORS = "lexis.translit"

_WORD_START = re.compile(rf"(^|[{re.escape(WORD_DELIMITERS)}])([^{re.escape(WORD_DELIMITERS)}])")
_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")


def _translit(error: UnicodeError):
    """
    Codec error handler: replace an unencodable character with the parts of
    its compatibility decomposition the target encoding can represent, or
    drop it. "é" becomes "e" in ASCII; "€" disappears from ISO-8859-1.
    """
    if not isinstance(error, UnicodeEncodeError):
        raise error

    replacement = []
    for char in error.object[error.start:error.end]:
        for part in unicodedata.normalize("NFKD", char):
            try:
                part.encode(error.encoding)
            except UnicodeEncodeError:
                continue
            replacement.append(part)
    return "".join(replacement), error.end


codecs.register_error(TRANSLIT_ERRORS, _translit)


def is_ascii(text: str) -> bool:
    """True if every codepoint is 7-bit ASCII."""
    return text.isascii()


def ord(char: str) -> int:
    """Codepoint of the first character, 0 for an empty string."""
    return builtins.ord(char[0]) if char else 0


def strlen(text: str) -> int:
    return len(text)


def strtolower(text: str) -> str:
    return text.lower()


def strtoupper(text: str) -> str:
    return text.upper()


def strpos(haystack: str, needle: Union[str, int], offset: int = 0) -> Optional[int]:
    """
    Position of the first occurrence of needle at or after offset.

    Args:
        haystack: Text to search
        needle: Substring, or a codepoint as int
        offset: Start position; negative counts from the end

    Returns:
        Codepoint index, or None if not found
    """
    if isinstance(needle, int):
        needle = chr(needle)
    position = haystack.find(needle, offset or 0)
    return position if position >= 0 else None


def strrpos(haystack: str, needle: Union[str, int], offset: int = 0) -> Optional[int]:
    """
    Position of the last occurrence of needle.

    A positive offset ignores matches starting before it; a negative offset
    ignores matches starting after len(haystack) + offset.
    """
    if isinstance(needle, int):
        needle = chr(needle)
    offset = offset or 0
    if offset >= 0:
        position = haystack.rfind(needle, offset)
    else:
        position = haystack.rfind(needle, 0, max(len(haystack) + offset + len(needle), 0))
    return position if position >= 0 else None


def substr(text: str, offset: int, length: Optional[int] = None) -> Optional[str]:
    """
    Portion of text starting at offset.

    Returns:
        The substring, or None when offset lies beyond the end of text

    Examples:
        >>> substr("Mississauga", 4)
        'issauga'
        >>> substr(" объектов на карте с", -4)
        'те с'
    """
    size = len(text)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return None

    if length is None:
        end = size
    elif length < 0:
        end = size + length
    else:
        end = offset + length

    if end <= offset:
        return ""
    return text[offset:end]


def substr_replace(text: str, replacement: str, offset: int, length: Optional[int] = None) -> str:
    """Replace the part of text selected by offset/length with replacement."""
    size = len(text)
    start = max(size + offset, 0) if offset < 0 else min(offset, size)

    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, start)
    else:
        end = min(start + length, size)

    return text[:start] + replacement + text[end:]


def str_ireplace(
    search: Union[str, list[str]],
    replace: Union[str, list[str]],
    subject: Union[str, list[str]],
) -> Union[str, list[str]]:
    """
    Case-insensitive replace.

    search and replace may be lists: each search item is replaced by the
    replace item at the same index ("" once replace runs out), or by replace
    itself when it is a single string. A list subject returns a list.
    """
    if isinstance(subject, list):
        return [str_ireplace(search, replace, item) for item in subject]

    searches = [search] if isinstance(search, str) else list(search)
    if isinstance(replace, str):
        replacements = [replace] * len(searches)
    else:
        replacements = list(replace) + [""] * (len(searches) - len(replace))

    for needle, substitute in zip(searches, replacements):
        if not needle:
            continue
        subject = re.sub(re.escape(needle), lambda _m, s=substitute: s, subject, flags=re.IGNORECASE)
    return subject


def str_pad(text: str, length: int, pad: str = " ", pad_type: int = STR_PAD_RIGHT) -> str:
    """
    Pad text to length codepoints with pad (repeated and truncated as needed).

    Nothing happens when length is not larger than the text.
    """
    missing = length - len(text)
    if missing <= 0 or not pad:
        return text

    def fill(count: int) -> str:
        return (pad * (count // len(pad) + 1))[:count]

    if pad_type == STR_PAD_LEFT:
        return fill(missing) + text
    if pad_type == STR_PAD_BOTH:
        left = missing // 2
        return fill(left) + text + fill(missing - left)
    return text + fill(missing)


def str_split(text: str, size: int = 1) -> list[str]:
    """Split text into chunks of size codepoints (the last may be shorter)."""
    if size < 1:
        raise InvalidArgumentError(f"Chunk size must be at least 1, got {size}")
    return [text[i:i + size] for i in range(0, len(text), size)]


def _segment(text: str, offset: Optional[int], length: Optional[int]) -> str:
    if offset is None and length is None:
        return text
    return substr(text, offset or 0, length) or ""


def strcspn(text: str, mask: str, offset: Optional[int] = None, length: Optional[int] = None) -> int:
    """Length of the initial segment containing none of the characters in mask."""
    segment = _segment(text, offset, length)
    for index, char in enumerate(segment):
        if char in mask:
            return index
    return len(segment)


def strspn(text: str, mask: str, offset: Optional[int] = None, length: Optional[int] = None) -> int:
    """Length of the initial segment made only of characters in mask."""
    segment = _segment(text, offset, length)
    for index, char in enumerate(segment):
        if char not in mask:
            return index
    return len(segment)


def stristr(haystack: str, needle: str) -> Optional[str]:
    """Case-insensitive search returning haystack from the first match on, or None."""
    if not needle:
        return haystack
    match = re.search(re.escape(needle), haystack, flags=re.IGNORECASE)
    return haystack[match.start():] if match else None


def strrev(text: str) -> str:
    return text[::-1]


def ltrim(text: str, chars: Optional[str] = None) -> str:
    """Strip chars (default: whitespace and NUL) from the left. chars="" is a no-op."""
    if chars == "":
        return text
    return text.lstrip(WHITESPACE if chars is None else chars)


def rtrim(text: str, chars: Optional[str] = None) -> str:
    if chars == "":
        return text
    return text.rstrip(WHITESPACE if chars is None else chars)


def trim(text: str, chars: Optional[str] = None) -> str:
    if chars == "":
        return text
    return text.strip(WHITESPACE if chars is None else chars)


def ucfirst(text: str, delimiter: Optional[str] = None, new_delimiter: Optional[str] = None) -> str:
    """
    Uppercase the first character, or of every delimiter-separated word.

    Args:
        text: Input text
        delimiter: Split text on this and uppercase each part
        new_delimiter: Join the parts with this instead (default: delimiter)

    Examples:
        >>> ucfirst("dr jekill and mister hyde", " ", "")
        'DrJekillAndMisterHyde'
    """
    if delimiter is None:
        return text[:1].upper() + text[1:]
    if new_delimiter is None:
        new_delimiter = delimiter
    return new_delimiter.join(ucfirst(part) for part in text.split(delimiter))


def lcfirst(text: str) -> str:
    return text[:1].lower() + text[1:]


def ucwords(text: str) -> str:
    """Uppercase the first character of each whitespace-delimited word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def transcode(source: Union[str, bytes], from_encoding: str, to_encoding: str) -> Optional[bytes]:
    """
    Convert text to another character encoding.

    Lossy by design: characters the target cannot represent are
    transliterated through their compatibility decomposition when possible
    and dropped otherwise. Bytes that are invalid in from_encoding are
    dropped too.

    Args:
        source: Text (str) or bytes encoded in from_encoding
        from_encoding: Encoding of byte input
        to_encoding: Target encoding name

    Returns:
        Encoded bytes, or None for non-text input or an unknown encoding

    Examples:
        >>> transcode("Åbc Öde", "UTF-8", "ISO-8859-1")
        b'\\xc5bc \\xd6de'
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode(from_encoding, errors="ignore")
        elif not isinstance(source, str):
            return None
        return source.encode(to_encoding, errors=TRANSLIT_ERRORS)
    except LookupError:
        return None


def valid(text: Union[str, bytes]) -> bool:
    """True if text is (or encodes to) well-formed UTF-8."""
    try:
        if isinstance(text, (bytes, bytearray)):
            bytes(text).decode("utf-8")
        else:
            text.encode("utf-8")
    except UnicodeError:
        return False
    return True


compliant = valid


def unicode_to_utf8(text: str) -> str:
    """
    Decode literal \\uXXXX escape sequences into characters.

    Escaped surrogate pairs are joined into the astral character they encode.
    """
    decoded = _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), text)
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


unicode_to_utf16 = unicode_to_utf8
