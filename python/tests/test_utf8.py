"""
Tests for the codepoint-safe string primitives in lexis.strings.utf8.
"""

import pytest

from lexis.errors import InvalidArgumentError
from lexis.strings import utf8


# ============================================================================
# Inspection
# ============================================================================


class TestInspection:
    """is_ascii, ord, strlen and case mapping."""

    def test_is_ascii(self):
        assert utf8.is_ascii("abc 123")
        assert not utf8.is_ascii("áÑ")
        assert utf8.is_ascii("")

    def test_ord(self):
        assert utf8.ord("Ж") == 1046
        assert utf8.ord("abc") == 97
        assert utf8.ord("") == 0

    def test_strlen_counts_codepoints(self):
        assert utf8.strlen("Би шил") == 6
        assert utf8.strlen("") == 0

    def test_case_mapping(self):
        assert utf8.strtolower("FÒÔ bàř") == "fòô bàř"
        assert utf8.strtoupper("fòô bàř") == "FÒÔ BÀŘ"


# ============================================================================
# Searching
# ============================================================================


class TestStrpos:
    """Tests for strpos() / strrpos()."""

    @pytest.mark.parametrize("haystack,needle,offset,expected", [
        ("missing", "sing", 0, 3),
        ("missing", "sting", 0, None),
        ("missing", "ing", 0, 4),
        (" объектов на карте с", "на карте", 0, 10),
        ("на карте с", "на карте", 2, None),
    ])
    def test_strpos(self, haystack, needle, offset, expected):
        assert utf8.strpos(haystack, needle, offset) == expected

    def test_strpos_codepoint_needle(self):
        assert utf8.strpos("abc", 99) == 2

    def test_strpos_negative_offset(self):
        assert utf8.strpos("abcabc", "a", -3) == 3

    @pytest.mark.parametrize("haystack,needle,offset,expected", [
        ("missing", "sing", 0, 3),
        ("missing", "sting", 0, None),
        ("missing", "ing", 0, 4),
        ("на карте с", "карт", 2, 3),
        ("abcabc", "a", 0, 3),
        ("abcabc", "a", -4, 0),
    ])
    def test_strrpos(self, haystack, needle, offset, expected):
        assert utf8.strrpos(haystack, needle, offset) == expected


class TestStristr:
    """Tests for stristr()."""

    def test_found(self):
        assert utf8.stristr("Hello World", "WORLD") == "World"

    def test_unicode(self):
        assert utf8.stristr("Би шил идэй", "ШИЛ") == "шил идэй"

    def test_not_found(self):
        assert utf8.stristr("haystack", "needle") is None

    def test_empty_needle(self):
        assert utf8.stristr("haystack", "") == "haystack"


class TestSpan:
    """Tests for strcspn() / strspn()."""

    @pytest.mark.parametrize("text,mask,offset,length,expected", [
        ("subject <a> string <a>", "<>", None, None, 8),
        ("Би шил {123} идэй {456} чадна", "}{", None, None, 7),
        ("Би шил {123} идэй {456} чадна", "}{", 13, 10, 5),
        ("no match here", "#", None, None, 13),
    ])
    def test_strcspn(self, text, mask, offset, length, expected):
        assert utf8.strcspn(text, mask, offset, length) == expected

    @pytest.mark.parametrize("text,mask,offset,length,expected", [
        ("A321 Main Street", "0123456789", 1, 2, 2),
        ("321 Main Street", "0123456789", None, -13, 2),
        ("321 Main Street", "0123456789", None, -12, 3),
        ("Main Street 321", "0123456789", None, -3, 0),
        ("Би шил идэй чадна", "Би", None, None, 2),
    ])
    def test_strspn(self, text, mask, offset, length, expected):
        assert utf8.strspn(text, mask, offset, length) == expected


# ============================================================================
# Slicing and replacing
# ============================================================================


class TestSubstr:
    """Tests for substr()."""

    @pytest.mark.parametrize("text,offset,length,expected", [
        ("Mississauga", 4, None, "issauga"),
        (" объектов на карте с", 10, 5, "на ка"),
        (" объектов на карте с", -4, None, "те с"),
        (" объектов на карте с", 99, None, None),
        ("abcdef", 1, -2, "bcd"),
        ("abcdef", 4, -3, ""),
        ("abcdef", 6, None, ""),
        ("abcdef", -99, 2, "ab"),
    ])
    def test_substr(self, text, offset, length, expected):
        assert utf8.substr(text, offset, length) == expected


class TestSubstrReplace:
    """Tests for substr_replace()."""

    @pytest.mark.parametrize("text,replacement,offset,length,expected", [
        ("321 Main Street", "Broadway Avenue", 4, None, "321 Broadway Avenue"),
        ("321 Main Street", "Broadway", 4, 4, "321 Broadway Street"),
        ("321 Main Street", "Broadway", -6, None, "321 Main Broadway"),
        ("Би шил", "Мы", 0, 2, "Мы шил"),
        ("abc", "X", 1, 0, "aXbc"),
        ("abcdef", "X", 1, -2, "aXef"),
    ])
    def test_substr_replace(self, text, replacement, offset, length, expected):
        assert utf8.substr_replace(text, replacement, offset, length) == expected


class TestStrIreplace:
    """Tests for str_ireplace()."""

    @pytest.mark.parametrize("search,replace,subject,expected", [
        ("Pig", "cow", "the pig jumped", "the cow jumped"),
        ("PIG", "cow", "the pig jumped over the pig", "the cow jumped over the cow"),
        (["PIG", "JUMPED"], ["cow", "hopped"], "the pig jumped over the pig", "the cow hopped over the cow"),
        (["PIG", "JUMPED"], "x", "the pig jumped", "the x x"),
        (["PIG", "JUMPED"], ["cow"], "the pig jumped", "the cow "),
        ("ШИЛ", "бор", "Би шил", "Би бор"),
    ])
    def test_replace(self, search, replace, subject, expected):
        assert utf8.str_ireplace(search, replace, subject) == expected

    def test_list_subject(self):
        assert utf8.str_ireplace("a", "b", ["aa", "Ab"]) == ["bb", "bb"]

    def test_replacement_is_literal(self):
        assert utf8.str_ireplace("x", r"\1", "axb") == r"a\1b"


class TestStrSplit:
    """Tests for str_split()."""

    @pytest.mark.parametrize("text,size,expected", [
        ("string", 1, ["s", "t", "r", "i", "n", "g"]),
        ("string", 2, ["st", "ri", "ng"]),
        ("волн", 3, ["вол", "н"]),
        ("волн", 10, ["волн"]),
        ("", 2, []),
    ])
    def test_split(self, text, size, expected):
        assert utf8.str_split(text, size) == expected

    def test_size_below_one_raises(self):
        with pytest.raises(InvalidArgumentError):
            utf8.str_split("abc", 0)


class TestStrPad:
    """Tests for str_pad()."""

    def test_right_by_default(self):
        assert utf8.str_pad("Би", 5) == "Би   "

    def test_left(self):
        assert utf8.str_pad("5", 3, "0", utf8.STR_PAD_LEFT) == "005"

    def test_both_puts_extra_on_the_right(self):
        assert utf8.str_pad("ab", 7, "*", utf8.STR_PAD_BOTH) == "**ab***"

    def test_multichar_pad_is_truncated(self):
        assert utf8.str_pad("x", 6, "ab") == "xababa"

    def test_shorter_length_is_noop(self):
        assert utf8.str_pad("abcdef", 3) == "abcdef"


class TestStrrev:
    """Tests for strrev()."""

    def test_reverse(self):
        assert utf8.strrev("Би шил") == "лиш иБ"

    def test_empty(self):
        assert utf8.strrev("") == ""


# ============================================================================
# Trimming and case
# ============================================================================


class TestTrim:
    """Tests for ltrim / rtrim / trim."""

    @pytest.mark.parametrize("text,chars,expected", [
        ("   abc def", None, "abc def"),
        ("   abc def", "", "   abc def"),
        ("Би шил", None, "Би шил"),
        ("\x0B\t\n\rБи шил", "\t\n\x0B", "\rБи шил"),
        ("1234abc", "0123456789", "abc"),
        ("\0 abc", None, "abc"),
    ])
    def test_ltrim(self, text, chars, expected):
        assert utf8.ltrim(text, chars) == expected

    @pytest.mark.parametrize("text,chars,expected", [
        ("abc def   ", None, "abc def"),
        ("abc def   ", "", "abc def   "),
        ("Би шил\x0B\t\n\r", "\t\n\x0B", "Би шил\x0B\t\n\r"),
        ("Би шил\r\t\n\x0B", "\t\n\x0B", "Би шил\r"),
        ("abc1234", "0123456789", "abc"),
    ])
    def test_rtrim(self, text, chars, expected):
        assert utf8.rtrim(text, chars) == expected

    @pytest.mark.parametrize("text,chars,expected", [
        ("   abc def   ", None, "abc def"),
        ("   abc def   ", "", "   abc def   "),
        ("xxБи шилxx", "x", "Би шил"),
    ])
    def test_trim(self, text, chars, expected):
        assert utf8.trim(text, chars) == expected


class TestUcfirst:
    """Tests for ucfirst / lcfirst / ucwords."""

    def test_ucfirst(self):
        assert utf8.ucfirst("ψυχή") == "Ψυχή"
        assert utf8.ucfirst("") == ""

    def test_ucfirst_with_delimiter(self):
        assert utf8.ucfirst("dr jekill and mister hyde", " ") == "Dr Jekill And Mister Hyde"

    def test_ucfirst_with_new_delimiter(self):
        assert utf8.ucfirst("dr jekill and mister hyde", " ", "_") == "Dr_Jekill_And_Mister_Hyde"
        assert utf8.ucfirst("dr jekill and mister hyde", " ", "") == "DrJekillAndMisterHyde"

    def test_lcfirst(self):
        assert utf8.lcfirst("Привет") == "привет"
        assert utf8.lcfirst("") == ""

    @pytest.mark.parametrize("text,expected", [
        ("hello world", "Hello World"),
        ("george\r\nwashington", "George\r\nWashington"),
        ("fòô bàř", "Fòô Bàř"),
        ("a\tb", "A\tB"),
        ("", ""),
    ])
    def test_ucwords(self, text, expected):
        assert utf8.ucwords(text) == expected


# ============================================================================
# Encodings
# ============================================================================


class TestTranscode:
    """Tests for transcode()."""

    def test_unrepresentable_characters_are_dropped(self):
        assert utf8.transcode("Åbc Öde €100", "UTF-8", "ISO-8859-1") == b"\xc5bc \xd6de 100"

    def test_transliterates_when_possible(self):
        assert utf8.transcode("café", "UTF-8", "ASCII") == b"cafe"

    def test_bytes_input(self):
        source = "Åbc".encode("utf-8")
        assert utf8.transcode(source, "UTF-8", "ISO-8859-1") == b"\xc5bc"

    def test_non_text_input(self):
        assert utf8.transcode(["not", "text"], "UTF-8", "ISO-8859-1") is None

    def test_unknown_encoding(self):
        assert utf8.transcode("abc", "UTF-8", "not-an-encoding") is None


class TestValid:
    """Tests for valid() / compliant()."""

    @pytest.mark.parametrize("text,expected", [
        (b"\xCF\xB0", True),
        (b"\xFBa", False),
        (b"\xFF ABC", False),
        (b"\xC3\xA9", True),
        ("", True),
        ("Би шил", True),
        ("\ud800", False),
    ])
    def test_valid(self, text, expected):
        assert utf8.valid(text) is expected

    def test_compliant_is_valid(self):
        assert utf8.compliant(b"\xFBa") is False
        assert utf8.compliant("abc") is True


class TestUnicodeToUtf8:
    """Tests for unicode_to_utf8() / unicode_to_utf16()."""

    def test_escapes(self):
        text = "\\u0422\\u0435\\u0441\\u0442 \\u0441\\u0438\\u0441\\u0442\\u0435\\u043c\\u044b"
        assert utf8.unicode_to_utf8(text) == "Тест системы"

    def test_surrogate_pair(self):
        assert utf8.unicode_to_utf8("\\ud83d\\ude00") == "\U0001F600"

    def test_plain_text_is_unchanged(self):
        assert utf8.unicode_to_utf8("Би шил") == "Би шил"

    def test_utf16_alias(self):
        assert utf8.unicode_to_utf16("\\u0041") == "A"
