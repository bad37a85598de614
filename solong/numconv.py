"""Number parsing and formatting in arbitrary digit bases.

Parsing follows the classic ``atoi`` rules: leading whitespace is skipped,
one optional sign is read, then digits are consumed until the first
character that is not a digit. Results are wrapped to the width of the C
integer type they model.
"""

from __future__ import annotations

DECIMAL = "0123456789"
_SPACES = frozenset("\t \r\v\n\f")

_INT_BITS = 32
_LONG_BITS = 64


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of the six ASCII whitespace characters."""
    return len(char) == 1 and char in _SPACES


def is_digit(char: str) -> bool:
    """Return True if ``char`` is an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading whitespace and one sign; return the sign and the rest."""
    rest = text.lstrip("".join(_SPACES))
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    return sign, rest


def _parse(text: str, base: str) -> int:
    sign, rest = _split_sign(text)
    radix = len(base)
    result = 0
    for char in rest:
        digit = base.find(char)
        if digit < 0:
            break
        result = result * radix + digit
    return result * sign


def atoi(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 32-bit signed int."""
    return _wrap_signed(_parse(text, DECIMAL), _INT_BITS)


def atol(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 64-bit signed int."""
    return _wrap_signed(_parse(text, DECIMAL), _LONG_BITS)


def atoi_base(base: str, text: str) -> int:
    """Parse an integer prefix of ``text`` whose digits are the characters of ``base``.

    A character's value is the index of its first occurrence in ``base``.
    """
    if not base:
        return 0
    return _wrap_signed(_parse(text, base), _INT_BITS)


def _digits(base: str, value: int) -> str:
    """Render a non-negative ``value`` with the digit alphabet ``base``."""
    if not base:
        raise ValueError("base must not be empty")
    radix = len(base)
    if value == 0:
        return base[0]
    if radix < 2:
        raise ValueError("base must have at least two digits")
    out = []
    while value > 0:
        value, digit = divmod(value, radix)
        out.append(base[digit])
    return "".join(reversed(out))


def itoa(n: int) -> str:
    """Format ``n`` (taken as a 32-bit signed int) in decimal."""
    return str(_wrap_signed(n, _INT_BITS))


def _signed_base(base: str, n: int, bits: int) -> str:
    # Negative numbers keep their sign but their digits are those of the
    # unsigned reinterpretation of the value.
    n = _wrap_signed(n, bits)
    digits = _digits(base, _wrap_unsigned(n, bits))
    return "-" + digits if n < 0 else digits


def itoa_base(base: str, n: int) -> str:
    """Format ``n`` as a 32-bit int with the digit alphabet ``base``."""
    return _signed_base(base, n, _INT_BITS)


def ltoa_base(base: str, n: int) -> str:
    """Format ``n`` as a 64-bit int with the digit alphabet ``base``."""
    return _signed_base(base, n, _LONG_BITS)


def ultoa_base(base: str, n: int) -> str:
    """Format ``n`` as a 64-bit unsigned int with the digit alphabet ``base``."""
    return _digits(base, _wrap_unsigned(n, _LONG_BITS))