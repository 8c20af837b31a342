"""Integer division, divisibility, modular power and root operations.

Division follows three conventions: truncating (``div_rem``), flooring
(``div_floor``, ``mod_floor``) and Euclidean (``div_euclid``, ``rem_euclid``).
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtendedGcd:
    """Greatest common divisor with Bézout coefficients: a*x + b*y == gcd."""

    gcd: int
    x: int
    y: int


def _ints(a: int, b: int) -> tuple[int, int]:
    return operator.index(a), operator.index(b)


def _check_divisor(b: int) -> None:
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")


def div_rem(a: int, b: int) -> tuple[int, int]:
    """Truncating quotient and remainder; the remainder has the sign of ``a``."""
    a, b = _ints(a, b)
    _check_divisor(b)
    q, r = divmod(abs(a), abs(b))
    if a < 0:
        r = -r
    if (a < 0) != (b < 0):
        q = -q
    return q, r


def div_floor(a: int, b: int) -> int:
    """Quotient rounded toward negative infinity."""
    a, b = _ints(a, b)
    _check_divisor(b)
    return a // b


def mod_floor(a: int, b: int) -> int:
    """Remainder of floored division; it has the sign of ``b``."""
    a, b = _ints(a, b)
    _check_divisor(b)
    return a % b


def div_mod_floor(a: int, b: int) -> tuple[int, int]:
    """Floored quotient and remainder together."""
    a, b = _ints(a, b)
    _check_divisor(b)
    return divmod(a, b)


def div_ceil(a: int, b: int) -> int:
    """Quotient rounded toward positive infinity."""
    a, b = _ints(a, b)
    _check_divisor(b)
    return -((-a) // b)


def div_euclid(a: int, b: int) -> int:
    """Euclidean quotient: the one whose remainder is never negative."""
    q, r = div_rem(a, b)
    if r < 0:
        return q - 1 if b > 0 else q + 1
    return q


def rem_euclid(a: int, b: int) -> int:
    """Euclidean remainder, always in ``0..abs(b)``."""
    _, r = div_rem(a, b)
    if r < 0:
        return r + abs(operator.index(b))
    return r


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; never negative."""
    a, b = _ints(a, b)
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of the magnitudes; never negative."""
    a, b = _ints(a, b)
    g = math.gcd(a, b)
    if g == 0:
        return 0
    return abs(a) // g * abs(b)


def gcd_lcm(a: int, b: int) -> tuple[int, int]:
    """Greatest common divisor and least common multiple together."""
    return gcd(a, b), lcm(a, b)


def extended_gcd(a: int, b: int) -> ExtendedGcd:
    """Greatest common divisor and coefficients x, y with a*x + b*y == gcd."""
    a, b = _ints(a, b)
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q, _ = div_rem(old_r, r)
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        return ExtendedGcd(-old_r, -old_s, -old_t)
    return ExtendedGcd(old_r, old_s, old_t)


def extended_gcd_lcm(a: int, b: int) -> tuple[ExtendedGcd, int]:
    """Extended gcd together with the least common multiple."""
    a, b = _ints(a, b)
    egcd = extended_gcd(a, b)
    if egcd.gcd == 0:
        return egcd, 0
    return egcd, abs(a) // egcd.gcd * abs(b)


def is_multiple_of(a: int, b: int) -> bool:
    """Whether ``abs(a)`` is a multiple of ``abs(b)``; only zero is a multiple of zero."""
    a, b = _ints(a, b)
    if b == 0:
        return a == 0
    return abs(a) % abs(b) == 0


def next_multiple_of(a: int, b: int) -> int:
    """Round ``a`` to the next multiple of ``b`` in the direction of ``b``'s sign."""
    a, b = _ints(a, b)
    m = mod_floor(a, b)
    return a if m == 0 else a + (b - m)


def prev_multiple_of(a: int, b: int) -> int:
    """Round ``a`` to the previous multiple of ``b`` against ``b``'s sign."""
    a, b = _ints(a, b)
    return a - mod_floor(a, b)


def modpow(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` reduced like ``mod_floor``.

    The result lies in ``[0, modulus)`` for a positive modulus and in
    ``(modulus, 0]`` for a negative one.
    """
    base = operator.index(base)
    exponent = operator.index(exponent)
    modulus = operator.index(modulus)
    if exponent < 0:
        raise ValueError("negative exponentiation is not supported!")
    if modulus == 0:
        raise ZeroDivisionError("attempt to calculate with zero modulus!")
    return pow(base, exponent, modulus)


def _root_magnitude(x: int, n: int) -> int:
    if x < 2 or n == 1:
        return x
    if n == 2:
        return math.isqrt(x)
    if n >= x.bit_length():
        return 1
    guess = 1 << -(-x.bit_length() // n)
    while True:
        nxt = ((n - 1) * guess + x // guess ** (n - 1)) // n
        if nxt >= guess:
            return guess
        guess = nxt


def nth_root(value: int, n: int) -> int:
    """Truncated principal ``n``-th root."""
    value = operator.index(value)
    n = operator.index(n)
    if n <= 0:
        raise ValueError(f"root degree {n} is meaningless")
    if value < 0:
        if n % 2 == 0:
            raise ValueError(f"root of degree {n} is imaginary")
        return -_root_magnitude(-value, n)
    return _root_magnitude(value, n)


def sqrt(value: int) -> int:
    """Truncated square root."""
    value = operator.index(value)
    if value < 0:
        raise ValueError("square root is imaginary")
    return math.isqrt(value)


def cbrt(value: int) -> int:
    """Truncated cube root, keeping the sign."""
    return nth_root(value, 3)