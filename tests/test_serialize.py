import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from signedint.serialize import (
    deserialize,
    deserialize_unsigned,
    serialize,
    serialize_unsigned,
    sign_from_int,
    sign_to_int,
)
from signedint.sign import Sign

FACTORIAL_100 = [
    0x00000000, 0x00000000, 0x00000000, 0x2735C61A, 0xEE8B02EA, 0xB3B72ED2,
    0x9420C6EC, 0x45570CCA, 0xDF103917, 0x943A321C, 0xEB21B5B2, 0x66EF9A70,
    0xA40D16E9, 0x28D54BBD, 0xDC240695, 0x964EC395, 0x1B30,
]


def test_unsigned_zero():
    assert serialize_unsigned(0) == []
    assert deserialize_unsigned([]) == 0


def test_signed_zero():
    assert serialize(0) == (0, [])
    assert deserialize((0, [])) == 0


def test_unsigned_one():
    assert serialize_unsigned(1) == [1]
    assert deserialize_unsigned([1]) == 1


def test_signed_one():
    assert serialize(1) == (1, [1])
    assert deserialize((1, [1])) == 1


def test_signed_negative_one():
    assert serialize(-1) == (-1, [1])
    assert deserialize((-1, [1])) == -1


def test_unsigned_factorial_100():
    n = math.factorial(100)
    assert serialize_unsigned(n) == FACTORIAL_100
    assert deserialize_unsigned(FACTORIAL_100) == n


def test_signed_factorial_100():
    n = math.factorial(100)
    assert serialize(n) == (1, FACTORIAL_100)
    assert deserialize((1, FACTORIAL_100)) == n


@pytest.mark.parametrize("length", range(1, 10))
def test_big_digits(length):
    digits = list(range(1, length + 1))
    n = deserialize_unsigned(digits)
    assert serialize_unsigned(n) == digits
    assert serialize(n) == (1, digits)
    assert deserialize((1, digits)) == n
    assert serialize(-n) == (-1, digits)
    assert deserialize((-1, digits)) == -n


@pytest.mark.parametrize(
    "sign, wire", [(Sign.MINUS, -1), (Sign.NO_SIGN, 0), (Sign.PLUS, 1)]
)
def test_sign_wire_values(sign, wire):
    assert sign_to_int(sign) == wire
    assert sign_from_int(wire) is sign


@pytest.mark.parametrize("wire", [2, -2, 127])
def test_invalid_sign(wire):
    with pytest.raises(ValueError, match="a sign of -1, 0, or 1"):
        sign_from_int(wire)


def test_zero_sign_discards_magnitude():
    assert deserialize((0, [5])) == 0


def test_nonzero_sign_with_empty_magnitude_is_zero():
    assert deserialize((-1, [])) == 0


def test_digit_out_of_range():
    with pytest.raises(ValueError):
        deserialize_unsigned([1 << 32])
    with pytest.raises(ValueError):
        deserialize_unsigned([-1])


def test_negative_magnitude_rejected():
    with pytest.raises(ValueError):
        serialize_unsigned(-5)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        deserialize((1,))


@given(st.integers(min_value=-(1 << 500), max_value=1 << 500))
def test_round_trip(n):
    sign, digits = serialize(n)
    assert deserialize((sign, digits)) == n
    assert all(0 <= d < 1 << 32 for d in digits)
    assert not digits or digits[-1] != 0