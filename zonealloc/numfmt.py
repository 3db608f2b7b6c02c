"""Integer parsing and formatting in arbitrary digit alphabets."""

from __future__ import annotations

import operator

_LEADING_BLANKS = " \n\t\r\v\f"
_MAX_CONSUMED = 20
_INT_BITS = 32


def has_repeated_chars(text: str) -> bool:
    """True if any character occurs more than once in *text*."""
    return len(set(text)) != len(text)


def _wrap_int32(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way a C ``int`` parser would.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. If the sign and digits together span
    twenty characters or more the result is 0. The value wraps around as a
    32-bit signed integer.
    """
    body = text.lstrip(_LEADING_BLANKS)
    negative = body.startswith("-")
    consumed = 1 if body[:1] in ("+", "-") else 0
    value = 0
    for ch in body[consumed:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
        consumed += 1
    if consumed >= _MAX_CONSUMED:
        return 0
    return _wrap_int32(-value if negative else value)


def format_int(n: int) -> str:
    """Decimal representation of *n*, with a leading '-' when negative."""
    return str(operator.index(n))


def to_base(n: int, base: str) -> str:
    """Write *n* using the characters of *base* as digits.

    The alphabet must hold at least two characters, none repeated; otherwise
    ValueError is raised. Negative numbers get a leading '-'.
    """
    n = operator.index(n)
    if len(base) < 2 or has_repeated_chars(base):
        raise ValueError(f"invalid digit alphabet: {base!r}")
    radix = len(base)
    magnitude = abs(n)
    digits = []
    while True:
        magnitude, remainder = divmod(magnitude, radix)
        digits.append(base[remainder])
        if magnitude == 0:
            break
    sign = "-" if n < 0 else ""
    return sign + "".join(reversed(digits))