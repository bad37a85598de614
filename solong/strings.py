"""String helpers with the semantics of the classic C string routines.

Character predicates and case conversions work on ASCII only. Searches
return indices instead of pointers: ``None`` means "not found".
Comparisons return -1, 0 or 1.
"""

from __future__ import annotations


def _code(char: str | int) -> int:
    """Return the code of ``char``, given as a one-character string or an int."""
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError("expected a single character")
    return ord(char)


def is_alpha(char: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alnum(char: str | int) -> bool:
    """Return True for an ASCII letter or decimal digit."""
    code = _code(char)
    return is_alpha(code) or ord("0") <= code <= ord("9")


def is_ascii(char: str | int) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 31 < _code(char) < 127


def to_upper(char: str) -> str:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    if "a" <= char <= "z" and len(char) == 1:
        return chr(ord(char) - 32)
    return char


def to_lower(char: str) -> str:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    if "A" <= char <= "Z" and len(char) == 1:
        return chr(ord(char) + 32)
    return char


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, else None.
    """
    if not needle:
        return 0
    if n < 0:
        raise ValueError("n must not be negative")
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


def strcmp(a: str, b: str) -> int:
    """Compare two strings by character code: -1, 0 or 1."""
    return _sign(a, b)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings: -1, 0 or 1."""
    if n <= 0:
        return 0
    return _sign(a[:n], b[:n])


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    The text ends at its first NUL; searching for NUL gives that end.
    """
    text = _terminated(text)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``.

    The text ends at its first NUL; searching for NUL gives that end.
    """
    text = _terminated(text)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strjoin(a: str, b: str) -> str:
    """Return the concatenation of ``a`` and ``b``."""
    return a + b