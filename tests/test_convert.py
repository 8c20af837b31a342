import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from signedint.convert import (
    TryFromBigIntError,
    checked_to_int,
    from_float,
    from_signed_bytes_be,
    from_signed_bytes_le,
    from_u32_digits,
    to_float,
    to_signed_bytes_be,
    to_signed_bytes_le,
    to_u32_digits,
    to_u64_digits,
    twos_complement_be,
    twos_complement_le,
)
from signedint.sign import Sign


def test_signed_bytes_documented_example():
    assert list(to_signed_bytes_be(-1125)) == [251, 155]
    assert list(to_signed_bytes_le(-1125)) == [155, 251]


def test_twos_complement_from_source_comments():
    assert twos_complement_le(b"\x01") == b"\xff"
    assert twos_complement_be(b"\x01\x00") == b"\xff\x00"
    assert twos_complement_le(b"") == b""


@given(st.binary())
def test_twos_complement_is_involution(data):
    assert twos_complement_le(twos_complement_le(data)) == data
    assert twos_complement_be(twos_complement_be(data)) == data


@given(st.integers())
def test_signed_bytes_round_trip(n):
    assert from_signed_bytes_be(to_signed_bytes_be(n)) == n
    assert from_signed_bytes_le(to_signed_bytes_le(n)) == n


@given(st.integers())
def test_signed_bytes_are_shortest(n):
    out = to_signed_bytes_be(n)
    assert n.to_bytes(len(out), "big", signed=True) == out
    if len(out) > 1:
        with pytest.raises(OverflowError):
            n.to_bytes(len(out) - 1, "big", signed=True)


@given(st.binary())
def test_from_signed_bytes_matches_stdlib(data):
    assert from_signed_bytes_be(data) == int.from_bytes(data, "big", signed=True)
    assert from_signed_bytes_le(data) == int.from_bytes(data, "little", signed=True)


def test_from_signed_bytes_empty_is_zero():
    assert from_signed_bytes_be(b"") == 0
    assert from_signed_bytes_le(b"") == 0


def test_u32_digits_documented_examples():
    assert to_u32_digits(-1125) == (Sign.MINUS, [1125])
    assert to_u32_digits(4294967295) == (Sign.PLUS, [4294967295])
    assert to_u32_digits(4294967296) == (Sign.PLUS, [0, 1])
    assert to_u32_digits(-112500000000) == (Sign.MINUS, [830850304, 26])
    assert to_u32_digits(112500000000) == (Sign.PLUS, [830850304, 26])


def test_u64_digits_documented_examples():
    assert to_u64_digits(-1125) == (Sign.MINUS, [1125])
    assert to_u64_digits(4294967296) == (Sign.PLUS, [4294967296])
    assert to_u64_digits(-112500000000) == (Sign.MINUS, [112500000000])
    assert to_u64_digits(1 << 64) == (Sign.PLUS, [0, 1])


def test_zero_digits_are_empty():
    assert to_u32_digits(0) == (Sign.NO_SIGN, [])
    assert to_u64_digits(0) == (Sign.NO_SIGN, [])


@given(st.integers())
def test_u32_digits_round_trip(n):
    sign, digits = to_u32_digits(n)
    assert from_u32_digits(sign, digits) == n


@given(st.integers())
def test_u64_digits_reassemble(n):
    sign, digits = to_u64_digits(n)
    magnitude = sum(d << (64 * i) for i, d in enumerate(digits))
    assert magnitude == abs(n)
    assert sign is Sign.of(n)


@pytest.mark.parametrize(
    "sign, digits, expected",
    [
        (Sign.PLUS, [1], 1),
        (Sign.PLUS, [0], 0),
        (Sign.MINUS, [1], -1),
        (Sign.NO_SIGN, [1], 0),
    ],
)
def test_from_u32_digits_normalizes_sign(sign, digits, expected):
    assert from_u32_digits(sign, digits) == expected


def test_from_u32_digits_rejects_non_sign():
    with pytest.raises(TypeError):
        from_u32_digits(1, [1])


@pytest.mark.parametrize(
    "value, bits, signed",
    [(255, 8, False), (0, 8, False), (127, 8, True), (-128, 8, True), (-(1 << 63), 64, True)],
)
def test_checked_to_int_in_range(value, bits, signed):
    assert checked_to_int(value, bits, signed) == value


@pytest.mark.parametrize(
    "value, bits, signed",
    [(256, 8, False), (-1, 8, False), (128, 8, True), (-129, 8, True), (1 << 64, 64, False)],
)
def test_checked_to_int_out_of_range(value, bits, signed):
    with pytest.raises(TryFromBigIntError) as info:
        checked_to_int(value, bits, signed)
    assert info.value.original == value


def test_checked_to_int_rejects_bad_width():
    with pytest.raises(ValueError):
        checked_to_int(1, 0, True)


@given(st.integers(min_value=-(1 << 127), max_value=(1 << 127) - 1))
def test_to_float_equals_i128_cast(n):
    assert to_float(n) == float(n)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_from_float_truncates(x):
    result = from_float(x)
    assert result == math.trunc(x)


def test_from_float_truncates_toward_zero():
    assert from_float(2.7) == 2
    assert from_float(-2.7) == -2


@pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
def test_from_float_rejects_non_finite(x):
    with pytest.raises(TryFromBigIntError):
        from_float(x)