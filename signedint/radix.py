"""Conversions between non-negative integers and digits in a radix."""

from __future__ import annotations

import functools
import operator
from collections.abc import Iterable, Iterator, Sequence

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {
    **{c: i for i, c in enumerate(_ALPHABET)},
    **{c.upper(): i for i, c in enumerate(_ALPHABET)},
}
_CHUNK_BITS = 64


class ParseBigIntError(ValueError):
    """Raised when text or digits cannot be read as an integer."""

    @classmethod
    def empty(cls) -> ParseBigIntError:
        return cls("cannot parse integer from empty string")

    @classmethod
    def invalid(cls) -> ParseBigIntError:
        return cls("invalid digit found in string")


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def radix_base(radix: int, bits: int) -> tuple[int, int]:
    """Greatest power of ``radix`` fitting in ``bits`` bits, as (base, power).

    Powers of two (and zero) give (0, 0).
    """
    if not 0 <= radix <= 256:
        raise ValueError(f"radix must be in 0..=256, got {radix}")
    if bits < 8:
        raise ValueError(f"bit size must be at least 8, got {bits}")
    if radix == 0 or _is_power_of_two(radix):
        return (0, 0)
    limit = (1 << bits) - 1
    base, power = radix, 1
    while base * radix <= limit:
        base *= radix
        power += 1
    return (base, power)


@functools.lru_cache(maxsize=None)
def radix_bases(bits: int) -> tuple[tuple[int, int], ...]:
    """Table of ``radix_base`` for every radix in 0..=256."""
    return tuple(radix_base(radix, bits) for radix in range(257))


def _chunk(radix: int) -> tuple[int, int]:
    if _is_power_of_two(radix):
        power = _CHUNK_BITS // (radix.bit_length() - 1)
        return radix**power, power
    return radix_bases(_CHUNK_BITS)[radix]


def _check_radix(radix: int, high: int) -> None:
    if not 2 <= radix <= high:
        raise ValueError(f"radix must be in the range 2..={high}, got {radix}")


def _magnitude(value: int) -> int:
    n = operator.index(value)
    if n < 0:
        raise ValueError("magnitude must not be negative")
    return n


def _digits_le(n: int, radix: int) -> list[int]:
    base, power = _chunk(radix)
    digits: list[int] = []
    while n >= base:
        n, chunk = divmod(n, base)
        for _ in range(power):
            chunk, digit = divmod(chunk, radix)
            digits.append(digit)
    while n:
        n, digit = divmod(n, radix)
        digits.append(digit)
    return digits or [0]


def _batched(items: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    head = len(items) % size
    if head:
        yield items[:head]
    for start in range(head, len(items), size):
        yield items[start : start + size]


def _combine_be(digits: Sequence[int], radix: int) -> int:
    base, power = _chunk(radix)
    value = 0
    for chunk in _batched(digits, power):
        part = 0
        for digit in chunk:
            part = part * radix + digit
        scale = base if len(chunk) == power else radix ** len(chunk)
        value = value * scale + part
    return value


def to_radix_le(magnitude: int, radix: int) -> list[int]:
    """Digits of ``magnitude`` in ``radix`` (2..=256), least significant first."""
    _check_radix(radix, 256)
    return _digits_le(_magnitude(magnitude), radix)


def to_radix_be(magnitude: int, radix: int) -> list[int]:
    """Digits of ``magnitude`` in ``radix`` (2..=256), most significant first."""
    return to_radix_le(magnitude, radix)[::-1]


def from_radix_be(digits: Iterable[int], radix: int) -> int:
    """Value of big-endian ``digits`` in ``radix`` (2..=256)."""
    _check_radix(radix, 256)
    values = [operator.index(d) for d in digits]
    if any(not 0 <= d < radix for d in values):
        raise ParseBigIntError.invalid()
    return _combine_be(values, radix)


def from_radix_le(digits: Iterable[int], radix: int) -> int:
    """Value of little-endian ``digits`` in ``radix`` (2..=256)."""
    return from_radix_be(list(digits)[::-1], radix)


def to_str_radix(magnitude: int, radix: int) -> str:
    """Lower-case text of ``magnitude`` in ``radix`` (2..=36)."""
    _check_radix(radix, 36)
    digits = _digits_le(_magnitude(magnitude), radix)
    return "".join(_ALPHABET[d] for d in reversed(digits))


def parse_str_radix(text: str, radix: int) -> int:
    """Parse unsigned ``text`` in ``radix`` (2..=36).

    One leading ``+`` is accepted, and underscores may separate digits
    but may not lead.
    """
    _check_radix(radix, 36)
    if text.startswith("+") and not text.startswith("++"):
        text = text[1:]
    if not text:
        raise ParseBigIntError.empty()
    if text.startswith("_"):
        raise ParseBigIntError.invalid()
    values = []
    for char in text:
        if char == "_":
            continue
        value = _DIGIT_VALUES.get(char)
        if value is None or value >= radix:
            raise ParseBigIntError.invalid()
        values.append(value)
    return _combine_be(values, radix)