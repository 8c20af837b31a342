"""Conversions between signed integers and bytes, digits, primitives and floats."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable
from typing import Any

from signedint.serialize import deserialize_unsigned, serialize_unsigned
from signedint.sign import Sign

_U64_MASK = (1 << 64) - 1


class TryFromBigIntError(ValueError):
    """Raised when an integer does not fit the requested target type."""

    def __init__(self, original: Any) -> None:
        super().__init__("out of range conversion regarding big integer attempted")
        self.original = original


def _twos_complement_lsb_first(data: Iterable[int]) -> bytearray:
    out = bytearray()
    carry = True
    for byte in data:
        digit = ~byte & 0xFF
        if carry:
            digit = (digit + 1) & 0xFF
            carry = digit == 0
        out.append(digit)
    return out


def twos_complement_le(data: bytes) -> bytes:
    """Two's complement of little-endian bytes, keeping the length."""
    return bytes(_twos_complement_lsb_first(data))


def twos_complement_be(data: bytes) -> bytes:
    """Two's complement of big-endian bytes, keeping the length."""
    return bytes(_twos_complement_lsb_first(reversed(data)))[::-1]


def _magnitude_be(n: int) -> bytes:
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


def from_signed_bytes_be(data: bytes) -> int:
    """Read big-endian two's-complement bytes; empty input gives zero."""
    data = bytes(data)
    if not data:
        return 0
    if data[0] > 0x7F:
        return -int.from_bytes(twos_complement_be(data), "big")
    return int.from_bytes(data, "big")


def from_signed_bytes_le(data: bytes) -> int:
    """Read little-endian two's-complement bytes; empty input gives zero."""
    return from_signed_bytes_be(bytes(data)[::-1])


def to_signed_bytes_be(value: int) -> bytes:
    """Shortest big-endian two's-complement bytes of ``value``."""
    n = operator.index(value)
    magnitude = _magnitude_be(abs(n))
    first = magnitude[0]
    exact_min = first == 0x80 and not any(magnitude[1:]) and n < 0
    if first > 0x7F and not exact_min:
        # the top bit belongs to the magnitude, so widen by one byte
        magnitude = b"\x00" + magnitude
    if n < 0:
        magnitude = twos_complement_be(magnitude)
    return magnitude


def to_signed_bytes_le(value: int) -> bytes:
    """Shortest little-endian two's-complement bytes of ``value``."""
    return to_signed_bytes_be(value)[::-1]


def to_u32_digits(value: int) -> tuple[Sign, list[int]]:
    """Sign and 32-bit digits of the magnitude, least significant first."""
    n = operator.index(value)
    return Sign.of(n), serialize_unsigned(abs(n))


def to_u64_digits(value: int) -> tuple[Sign, list[int]]:
    """Sign and 64-bit digits of the magnitude, least significant first."""
    n = operator.index(value)
    magnitude = abs(n)
    digits = [
        (magnitude >> shift) & _U64_MASK
        for shift in range(0, magnitude.bit_length(), 64)
    ]
    return Sign.of(n), digits


def from_u32_digits(sign: Sign, digits: Iterable[int]) -> int:
    """Build an integer from a sign and 32-bit digits, least significant first.

    A ``NO_SIGN`` sign or a zero magnitude gives zero.
    """
    if not isinstance(sign, Sign):
        raise TypeError(f"expected a Sign, got {type(sign).__name__}")
    magnitude = deserialize_unsigned(digits)
    if sign is Sign.MINUS:
        return -magnitude
    if sign is Sign.PLUS:
        return magnitude
    return 0


def checked_to_int(value: int, bits: int, signed: bool) -> int:
    """Return ``value`` if it fits a primitive of ``bits`` bits.

    Raises TryFromBigIntError otherwise.
    """
    n = operator.index(value)
    bits = operator.index(bits)
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= n <= high:
        raise TryFromBigIntError(value)
    return n


def to_float(value: int) -> float:
    """Nearest float to ``value``."""
    return float(operator.index(value))


def from_float(value: float) -> int:
    """Integer part of a finite float, truncated toward zero."""
    x = float(value)
    if not math.isfinite(x):
        raise TryFromBigIntError(value)
    return int(x)