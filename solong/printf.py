"""A small ``printf`` supporting the conversions c, s, d, i, u, p, x, X and %.

Any other character after ``%`` is printed as is, together with the ``%``.
Integers are taken as 32-bit values and pointers as 64-bit unsigned values.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

from solong.numconv import DECIMAL, itoa, ltoa_base, ultoa_base

HEX_LOWER = "0123456789abcdef"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError("%s expects a string or None")
    return value


def _pointer(value: Any) -> str:
    if not value:
        return NULL_POINTER
    return "0x" + ultoa_base(HEX_LOWER, int(value))


def _convert(flag: str, take: Callable[[], Any]) -> str:
    if flag == "c":
        return _char(take())
    if flag == "s":
        return _string(take())
    if flag in ("d", "i"):
        return itoa(int(take()))
    if flag == "u":
        return ltoa_base(DECIMAL, int(take()) & _UINT_MASK)
    if flag == "p":
        return _pointer(take())
    if flag == "x":
        return ltoa_base(HEX_LOWER, int(take()) & _UINT_MASK)
    if flag == "X":
        return ltoa_base(HEX_LOWER, int(take()) & _UINT_MASK).upper()
    if flag == "%":
        return "%"
    return "%" + flag


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf(fmt, *args)`` would print."""
    if fmt is None:
        raise TypeError("format must be a string")
    values: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        flag = next(chars, None)
        if flag is None:
            out.append("%")
            break
        out.append(_convert(flag, take))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8"))