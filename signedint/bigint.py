"""A signed arbitrary-precision integer value type."""

from __future__ import annotations

import functools
import operator
from collections.abc import Iterable, Iterator
from typing import Any, Optional, Union

from signedint import bits as _bits
from signedint import convert as _convert
from signedint import integer as _integer
from signedint import radix as _radix
from signedint.radix import ParseBigIntError
from signedint.sign import Sign

IntLike = Union["BigInt", int]


def _as_int(value: Any) -> int:
    if isinstance(value, BigInt):
        return value._value
    return operator.index(value)


def _operand(value: Any) -> Optional[int]:
    if isinstance(value, BigInt):
        return value._value
    try:
        return operator.index(value)
    except TypeError:
        return None


def _signed(sign: Sign, magnitude: int) -> int:
    if sign is Sign.MINUS:
        return -magnitude
    if sign is Sign.PLUS:
        return magnitude
    return 0


def _parse(text: str, radix: int) -> int:
    sign = Sign.PLUS
    if text.startswith("-"):
        tail = text[1:]
        if not tail.startswith("+"):
            text = tail
        sign = Sign.MINUS
    return _signed(sign, _radix.parse_str_radix(text, radix))


def _magnitude_bytes_be(n: int) -> bytes:
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


@functools.total_ordering
class BigInt:
    """An immutable signed integer of any size.

    Division with ``//``, ``%`` and ``divmod`` truncates toward zero, and the
    remainder takes the sign of the dividend. The floored and Euclidean
    conventions are available as methods. Right shifts round toward negative
    infinity, and bitwise operators act on infinite two's complement.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[IntLike, str] = 0) -> None:
        if isinstance(value, BigInt):
            number = value._value
        elif isinstance(value, str):
            number = _parse(value, 10)
        else:
            number = operator.index(value)
        self._value = number

    # construction

    @classmethod
    def from_parts(cls, sign: Sign, magnitude: IntLike) -> BigInt:
        """Build from a sign and a non-negative magnitude.

        ``NO_SIGN`` or a zero magnitude gives zero.
        """
        if not isinstance(sign, Sign):
            raise TypeError(f"expected a Sign, got {type(sign).__name__}")
        m = _as_int(magnitude)
        if m < 0:
            raise ValueError("magnitude must not be negative")
        return cls(_signed(sign, m))

    @classmethod
    def from_slice(cls, sign: Sign, digits: Iterable[int]) -> BigInt:
        """Build from a sign and 32-bit digits, least significant first."""
        return cls(_convert.from_u32_digits(sign, digits))

    @classmethod
    def from_bytes_be(cls, sign: Sign, data: bytes) -> BigInt:
        """Build from a sign and big-endian magnitude bytes."""
        return cls.from_parts(sign, int.from_bytes(bytes(data), "big"))

    @classmethod
    def from_bytes_le(cls, sign: Sign, data: bytes) -> BigInt:
        """Build from a sign and little-endian magnitude bytes."""
        return cls.from_parts(sign, int.from_bytes(bytes(data), "little"))

    @classmethod
    def from_signed_bytes_be(cls, data: bytes) -> BigInt:
        """Build from big-endian two's-complement bytes."""
        return cls(_convert.from_signed_bytes_be(data))

    @classmethod
    def from_signed_bytes_le(cls, data: bytes) -> BigInt:
        """Build from little-endian two's-complement bytes."""
        return cls(_convert.from_signed_bytes_le(data))

    @classmethod
    def from_str_radix(cls, text: str, radix: int) -> BigInt:
        """Parse text in ``radix`` (2..=36) with an optional leading sign."""
        return cls(_parse(text, radix))

    @classmethod
    def parse_bytes(cls, buf: bytes, radix: int) -> Optional[BigInt]:
        """Parse UTF-8 bytes in ``radix``; None when they are not a number."""
        try:
            text = bytes(buf).decode("utf-8")
        except UnicodeDecodeError:
            return None
        try:
            return cls.from_str_radix(text, radix)
        except ParseBigIntError:
            return None

    @classmethod
    def from_radix_be(cls, sign: Sign, digits: Iterable[int], radix: int) -> BigInt:
        """Build from big-endian digits in ``radix`` (2..=256)."""
        return cls.from_parts(sign, _radix.from_radix_be(digits, radix))

    @classmethod
    def from_radix_le(cls, sign: Sign, digits: Iterable[int], radix: int) -> BigInt:
        """Build from little-endian digits in ``radix`` (2..=256)."""
        return cls.from_parts(sign, _radix.from_radix_le(digits, radix))

    @classmethod
    def from_float(cls, value: float) -> BigInt:
        """Integer part of a finite float, truncated toward zero."""
        return cls(_convert.from_float(value))

    # inspection and conversion

    def sign(self) -> Sign:
        return Sign.of(self._value)

    def magnitude(self) -> int:
        return abs(self._value)

    def into_parts(self) -> tuple[Sign, int]:
        return self.sign(), self.magnitude()

    def to_bytes_be(self) -> tuple[Sign, bytes]:
        """Sign and big-endian magnitude bytes; zero gives a single zero byte."""
        return self.sign(), _magnitude_bytes_be(self.magnitude())

    def to_bytes_le(self) -> tuple[Sign, bytes]:
        """Sign and little-endian magnitude bytes."""
        return self.sign(), _magnitude_bytes_be(self.magnitude())[::-1]

    def to_u32_digits(self) -> tuple[Sign, list[int]]:
        return _convert.to_u32_digits(self._value)

    def to_u64_digits(self) -> tuple[Sign, list[int]]:
        return _convert.to_u64_digits(self._value)

    def iter_u32_digits(self) -> Iterator[int]:
        yield from self.to_u32_digits()[1]

    def iter_u64_digits(self) -> Iterator[int]:
        yield from self.to_u64_digits()[1]

    def to_signed_bytes_be(self) -> bytes:
        return _convert.to_signed_bytes_be(self._value)

    def to_signed_bytes_le(self) -> bytes:
        return _convert.to_signed_bytes_le(self._value)

    def to_str_radix(self, radix: int) -> str:
        """Lower-case text in ``radix`` (2..=36), with a leading ``-`` if negative."""
        text = _radix.to_str_radix(self.magnitude(), radix)
        return "-" + text if self._value < 0 else text

    def to_radix_be(self, radix: int) -> tuple[Sign, list[int]]:
        return self.sign(), _radix.to_radix_be(self.magnitude(), radix)

    def to_radix_le(self, radix: int) -> tuple[Sign, list[int]]:
        return self.sign(), _radix.to_radix_le(self.magnitude(), radix)

    def to_unsigned(self) -> Optional[int]:
        """The value as a non-negative int, or None if it is negative."""
        return None if self._value < 0 else self._value

    def bits(self) -> int:
        return _bits.bit_length(self._value)

    def trailing_zeros(self) -> Optional[int]:
        return _bits.trailing_zeros(self._value)

    def bit(self, position: int) -> bool:
        return _bits.bit(self._value, position)

    def with_bit(self, position: int, value: bool) -> BigInt:
        """Copy with bit ``position`` set or cleared (two's complement)."""
        return BigInt(_bits.set_bit(self._value, position, value))

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_even(self) -> bool:
        return self._value % 2 == 0

    def is_odd(self) -> bool:
        return self._value % 2 == 1

    def signum(self) -> BigInt:
        return BigInt(self.sign().value)

    def abs_sub(self, other: IntLike) -> BigInt:
        """``self - other`` when positive, otherwise zero."""
        o = _as_int(other)
        return BigInt(0) if self._value <= o else BigInt(self._value - o)

    # division and number theory

    def div(self, other: IntLike) -> BigInt:
        return BigInt(_integer.div_rem(self._value, _as_int(other))[0])

    def rem(self, other: IntLike) -> BigInt:
        return BigInt(_integer.div_rem(self._value, _as_int(other))[1])

    def div_rem(self, other: IntLike) -> tuple[BigInt, BigInt]:
        q, r = _integer.div_rem(self._value, _as_int(other))
        return BigInt(q), BigInt(r)

    def checked_div(self, other: IntLike) -> Optional[BigInt]:
        """Truncating quotient, or None when dividing by zero."""
        o = _as_int(other)
        if o == 0:
            return None
        return self.div(o)

    def div_floor(self, other: IntLike) -> BigInt:
        return BigInt(_integer.div_floor(self._value, _as_int(other)))

    def mod_floor(self, other: IntLike) -> BigInt:
        return BigInt(_integer.mod_floor(self._value, _as_int(other)))

    def div_ceil(self, other: IntLike) -> BigInt:
        return BigInt(_integer.div_ceil(self._value, _as_int(other)))

    def div_euclid(self, other: IntLike) -> BigInt:
        return BigInt(_integer.div_euclid(self._value, _as_int(other)))

    def rem_euclid(self, other: IntLike) -> BigInt:
        return BigInt(_integer.rem_euclid(self._value, _as_int(other)))

    def gcd(self, other: IntLike) -> BigInt:
        return BigInt(_integer.gcd(self._value, _as_int(other)))

    def lcm(self, other: IntLike) -> BigInt:
        return BigInt(_integer.lcm(self._value, _as_int(other)))

    def is_multiple_of(self, other: IntLike) -> bool:
        return _integer.is_multiple_of(self._value, _as_int(other))

    def next_multiple_of(self, other: IntLike) -> BigInt:
        return BigInt(_integer.next_multiple_of(self._value, _as_int(other)))

    def prev_multiple_of(self, other: IntLike) -> BigInt:
        return BigInt(_integer.prev_multiple_of(self._value, _as_int(other)))

    def pow(self, exponent: IntLike) -> BigInt:
        """``self`` raised to a non-negative exponent."""
        e = _as_int(exponent)
        if e < 0:
            raise ValueError("negative exponentiation is not supported!")
        return BigInt(self._value**e)

    def modpow(self, exponent: IntLike, modulus: IntLike) -> BigInt:
        """``(self ** exponent)`` reduced like ``mod_floor`` by ``modulus``."""
        return BigInt(_integer.modpow(self._value, _as_int(exponent), _as_int(modulus)))

    def sqrt(self) -> BigInt:
        return BigInt(_integer.sqrt(self._value))

    def cbrt(self) -> BigInt:
        return BigInt(_integer.cbrt(self._value))

    def nth_root(self, n: int) -> BigInt:
        return BigInt(_integer.nth_root(self._value, n))

    # arithmetic operators

    def __add__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value + o)

    def __radd__(self, other: Any) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value - o)

    def __rsub__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(o - self._value)

    def __mul__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value * o)

    def __rmul__(self, other: Any) -> BigInt:
        return self.__mul__(other)

    def __floordiv__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else self.div(o)

    def __rfloordiv__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(o).div(self)

    def __mod__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else self.rem(o)

    def __rmod__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(o).rem(self)

    def __divmod__(self, other: Any) -> tuple[BigInt, BigInt]:
        o = _operand(other)
        return NotImplemented if o is None else self.div_rem(o)

    def __pow__(self, exponent: Any) -> BigInt:
        e = _operand(exponent)
        return NotImplemented if e is None else self.pow(e)

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def __invert__(self) -> BigInt:
        return BigInt(~self._value)

    def __and__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value & o)

    def __rand__(self, other: Any) -> BigInt:
        return self.__and__(other)

    def __or__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value | o)

    def __ror__(self, other: Any) -> BigInt:
        return self.__or__(other)

    def __xor__(self, other: Any) -> BigInt:
        o = _operand(other)
        return NotImplemented if o is None else BigInt(self._value ^ o)

    def __rxor__(self, other: Any) -> BigInt:
        return self.__xor__(other)

    def __lshift__(self, shift: Any) -> BigInt:
        s = _operand(shift)
        return NotImplemented if s is None else BigInt(_bits.shl(self._value, s))

    def __rshift__(self, shift: Any) -> BigInt:
        s = _operand(shift)
        return NotImplemented if s is None else BigInt(_bits.shr(self._value, s))

    # comparison and conversion protocols

    def __eq__(self, other: Any) -> bool:
        o = _operand(other)
        return NotImplemented if o is None else self._value == o

    def __lt__(self, other: Any) -> bool:
        o = _operand(other)
        return NotImplemented if o is None else self._value < o

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return _convert.to_float(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt({self._value})"

    def __format__(self, spec: str) -> str:
        return format(self._value, spec)