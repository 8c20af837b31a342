"""Stable serialized form of signed big integers.

A magnitude is a list of 32-bit digits, least significant first; a signed
value is a pair of its sign (-1, 0 or 1) and its magnitude's digits.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from typing import Any

from signedint.sign import Sign

_DIGIT_BITS = 32
_DIGIT_MASK = (1 << _DIGIT_BITS) - 1

# The wire values must never change.
_SIGN_TO_INT = {Sign.MINUS: -1, Sign.NO_SIGN: 0, Sign.PLUS: 1}
_INT_TO_SIGN = {v: k for k, v in _SIGN_TO_INT.items()}


def sign_to_int(sign: Sign) -> int:
    """Serialized form of a sign."""
    return _SIGN_TO_INT[sign]


def sign_from_int(value: int) -> Sign:
    """Read a serialized sign."""
    try:
        return _INT_TO_SIGN[operator.index(value)]
    except (KeyError, TypeError):
        raise ValueError(
            f"invalid value: {value!r}, expected a sign of -1, 0, or 1"
        ) from None


def serialize_unsigned(magnitude: int) -> list[int]:
    """32-bit digits of a non-negative integer, least significant first."""
    n = operator.index(magnitude)
    if n < 0:
        raise ValueError("magnitude must not be negative")
    return [(n >> shift) & _DIGIT_MASK for shift in range(0, n.bit_length(), _DIGIT_BITS)]


def deserialize_unsigned(digits: Iterable[int]) -> int:
    """Read 32-bit digits, least significant first."""
    value = 0
    for position, digit in enumerate(digits):
        digit = operator.index(digit)
        if not 0 <= digit <= _DIGIT_MASK:
            raise ValueError(f"digit out of 32-bit range: {digit}")
        value |= digit << (position * _DIGIT_BITS)
    return value


def serialize(value: int) -> tuple[int, list[int]]:
    """Serialize a signed integer as (sign, digits)."""
    n = operator.index(value)
    return sign_to_int(Sign.of(n)), serialize_unsigned(abs(n))


def deserialize(data: Sequence[Any]) -> int:
    """Read a (sign, digits) pair; a zero sign or magnitude gives zero."""
    if len(data) != 2:
        raise ValueError(f"expected a pair of sign and digits, got {len(data)} items")
    raw_sign, digits = data
    sign = sign_from_int(raw_sign)
    magnitude = deserialize_unsigned(digits)
    if sign is Sign.MINUS:
        return -magnitude
    if sign is Sign.PLUS:
        return magnitude
    return 0