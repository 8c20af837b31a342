"""Bit queries and shifts on signed integers.

Negative values are treated as infinite two's complement, so ``bit`` and
``set_bit`` behave as if every bit above the magnitude were set. Right
shifts round toward negative infinity.
"""

from __future__ import annotations

import operator


def _position(position: int, what: str) -> int:
    p = operator.index(position)
    if p < 0:
        raise ValueError(f"{what} must not be negative, got {p}")
    return p


def bit_length(value: int) -> int:
    """Fewest bits needed to express ``value``, not counting the sign."""
    return abs(operator.index(value)).bit_length()


def trailing_zeros(value: int) -> int | None:
    """Number of least-significant zero bits, or None when ``value`` is zero."""
    n = abs(operator.index(value))
    if n == 0:
        return None
    return (n & -n).bit_length() - 1


def bit(value: int, position: int) -> bool:
    """Whether bit ``position`` is set, in two's complement for negatives."""
    n = operator.index(value)
    p = _position(position, "bit position")
    return bool((n >> p) & 1)


def set_bit(value: int, position: int, flag: bool) -> int:
    """Return ``value`` with bit ``position`` set or cleared.

    Negative values are handled in two's complement.
    """
    n = operator.index(value)
    p = _position(position, "bit position")
    mask = 1 << p
    return n | mask if flag else n & ~mask


def shl(value: int, shift: int) -> int:
    """Shift ``value`` left by ``shift`` bits."""
    n = operator.index(value)
    return n << _position(shift, "shift")


def shr(value: int, shift: int) -> int:
    """Shift ``value`` right by ``shift`` bits, rounding toward negative infinity."""
    n = operator.index(value)
    return n >> _position(shift, "shift")