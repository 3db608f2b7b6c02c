"""Unsigned integer formatting for fixed-width machine integers."""

from __future__ import annotations

import operator

from zonealloc.numfmt import has_repeated_chars

_DECIMAL = "0123456789"


def _wrap_unsigned(n: int, bits: int) -> int:
    n = operator.index(n)
    bits = operator.index(bits)
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return n & ((1 << bits) - 1)


def to_base_unsigned(n: int, base: str, bits: int = 64) -> str:
    """Write *n*, taken as an unsigned integer of *bits* width, in *base*.

    Values outside the range of the width wrap around as they would when
    stored in an unsigned machine integer, so negative numbers come out as
    their two's-complement value. The digit alphabet must hold at least two
    characters, none repeated; otherwise ValueError is raised.
    """
    if len(base) < 2 or has_repeated_chars(base):
        raise ValueError(f"invalid digit alphabet: {base!r}")
    value = _wrap_unsigned(n, bits)
    radix = len(base)
    digits = []
    while True:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def format_unsigned(n: int, bits: int = 64) -> str:
    """Decimal representation of *n* taken as an unsigned *bits*-wide integer."""
    return to_base_unsigned(n, _DECIMAL, bits)