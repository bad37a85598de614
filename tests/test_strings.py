import string

import pytest

from solong.strings import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_print,
    split,
    strchr,
    strcmp,
    strjoin,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(char):
    assert is_alpha(char) is True
    assert is_alnum(char) is True


@pytest.mark.parametrize("char", list(string.digits))
def test_digits_are_alnum_not_alpha(char):
    assert is_alpha(char) is False
    assert is_alnum(char) is True


@pytest.mark.parametrize("char", ["_", " ", "-", "é", "\n"])
def test_other_chars_not_alnum(char):
    assert is_alnum(char) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_predicate_rejects_multichar():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_roundtrip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
    assert to_upper("5") == "5"
    assert to_lower("?") == "?"
    assert to_upper("é") == "é"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("one", ",") == ["one"]


def test_split_join_roundtrip():
    words = ["a", "bc", "def"]
    assert split(",".join(words), ",") == words


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a  ", " ") == "a"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim("", "x") == ""


def test_substr():
    assert substr("hola", 2, 2) == "la"
    assert substr("hola", 2, 10) == "la"
    assert substr("hola", 4, 1) == ""
    assert substr("hola", 9, 1) == ""
    with pytest.raises(ValueError):
        substr("hola", -1, 2)


def test_strnstr():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", len(hay)) == hay.index("Bar")
    assert strnstr(hay, "Bar", 6) is None
    assert strnstr(hay, "Bar", 7) == 4
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "Qux", len(hay)) is None


def test_strnstr_ber_extension():
    name = "maps/level.ber"
    assert strnstr(name[-4:], ".ber", 4) == 0
    assert strnstr("maps/level.txt"[-4:], ".ber", 4) is None


def test_strcmp():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") == -1
    assert strcmp("abd", "abc") == 1
    assert strcmp("ab", "abc") == -1
    assert strcmp("abc", "") == 1


def test_strncmp():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == -1
    assert strncmp("zzz", "aaa", 0) == 0
    assert strncmp("ab", "abc", 5) == -1


def test_strchr_and_strrchr():
    text = "hello"
    assert strchr(text, "l") == text.index("l")
    assert strrchr(text, "l") == text.rindex("l")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_nul_gives_end():
    assert strchr("abc", "\0") == 3
    assert strrchr("abc", "\0") == 3
    assert strchr("ab\0cd", "c") is None


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "x") == "x"