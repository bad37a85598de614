import pytest

from solong.printf import NULL_POINTER, NULL_STRING, format_printf, printf


def test_plain_text_is_unchanged():
    assert format_printf("hello world") == "hello world"


def test_source_message():
    text = format_printf("You made %d moves in total\n", 5)
    assert text == "You made 5 moves in total\n"


@pytest.mark.parametrize("n", [0, 7, -1, 123456, -2147483648, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_decimal_wraps_to_int():
    assert int(format_printf("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**31 + 5])
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    assert int(lower, 16) == n
    assert format_printf("%X", n) == lower.upper()


def test_unsigned_matches_hex_of_negative():
    assert int(format_printf("%u", -1)) == int(format_printf("%x", -1), 16)
    assert int(format_printf("%u", 42)) == 42


def test_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == NULL_STRING
    assert NULL_STRING == "(null)"


def test_pointer():
    assert format_printf("%p", None) == NULL_POINTER
    assert format_printf("%p", 0) == "(nil)"
    text = format_printf("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_char_from_int_and_str():
    assert format_printf("%c", 65) == chr(65)
    assert format_printf("%c%c", "x", "y") == "xy"


def test_percent_and_unknown_flag():
    assert format_printf("100%%") == "100%"
    assert format_printf("%q") == "%q"


def test_trailing_percent():
    assert format_printf("abc%") == "abc%"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("score: %d %s\n", 3, "ok")
    out = capsys.readouterr().out
    assert out == format_printf("score: %d %s\n", 3, "ok")
    assert count == len(out.encode("utf-8"))