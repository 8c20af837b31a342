# signedint

Arbitrary-precision signed integers seen as a sign and an unsigned magnitude.

`signedint.bigint.BigInt` is an immutable integer type that works with
Python's `int` in arithmetic, comparison and hashing, and adds the
conversions expected of a sign-and-magnitude integer library:

- construction from a sign and magnitude (`BigInt.from_parts`,
  `BigInt.from_slice` with 32-bit digits, least significant first)
- big- and little-endian bytes, plain (`to_bytes_be`, `from_bytes_le`, ...)
  and two's complement (`to_signed_bytes_be`, `from_signed_bytes_le`, ...)
- digits in any radix from 2 to 256 (`to_radix_be`, `from_radix_le`, ...)
- text in radix 2 to 36 (`to_str_radix`, `from_str_radix`, `parse_bytes`)
- 32- and 64-bit digit lists (`to_u32_digits`, `iter_u64_digits`, ...)
- truncating, floor, ceiling and Euclidean division, gcd/lcm, multiples,
  `pow`, `modpow`, `sqrt`, `cbrt`, `nth_root`
- two's-complement bit access (`bit`, `with_bit`, `trailing_zeros`, `bits`)

## Installation

```
pip install signedint
```

## Usage

```python
from signedint.bigint import BigInt
from signedint.sign import Sign

n = BigInt(-1125)
n.to_bytes_be()          # (<Sign.MINUS: -1>, b'\x04e')
n.to_signed_bytes_be()   # b'\xfb\x9b'

BigInt.from_bytes_be(Sign.PLUS, b"Hello world!")
# BigInt(22405534230753963835153736737)

BigInt.parse_bytes(b"ABCD", 16)   # BigInt(43981)
BigInt.parse_bytes(b"G", 16)      # None

BigInt(-0xFFFF).to_radix_be(159)  # (<Sign.MINUS: -1>, [2, 94, 27])

BigInt(-7).div_floor(2)           # BigInt(-4)
BigInt(-7).div_rem(2)             # (BigInt(-3), BigInt(-1))
BigInt(-7) // 2                   # BigInt(-3)
BigInt(4).modpow(13, 497)         # BigInt(445)
```

`BigInt` accepts an `int`, another `BigInt` or a decimal string.
Unlike `int`, its `//`, `%` and `divmod` truncate toward zero and the
remainder takes the sign of the dividend; the floored and Euclidean forms
are the methods `div_floor`, `mod_floor`, `div_euclid` and `rem_euclid`.
Right shifts round toward negative infinity, and bitwise operators act on
infinite two's complement.

`sign()` is `Sign.NO_SIGN` exactly when the value is zero. `from_parts`
with a zero magnitude gives zero whatever the sign, and `Sign.NO_SIGN` with
a non-zero magnitude also gives zero.

## Modules

- `signedint.sign`: the `Sign` enum (`MINUS`, `NO_SIGN`, `PLUS`), with
  negation, multiplication and `Sign.of(number)`.
- `signedint.radix`: `radix_base` and `radix_bases` (greatest power of each
  radix fitting in a bit size), digit conversion in radix 2–256, text in
  radix 2–36, and `ParseBigIntError`.
- `signedint.convert`: two's-complement byte forms, 32/64-bit digit lists,
  `checked_to_int` for range checks against primitive widths (raising
  `TryFromBigIntError`), and float conversion.
- `signedint.integer`: division conventions, `gcd`, `lcm`, `extended_gcd`
  (returning `ExtendedGcd`), multiples, `modpow` and integer roots on plain
  integers.
- `signedint.bits`: bit length, trailing zeros, two's-complement `bit` and
  `set_bit`, and shifts.
- `signedint.serialize`: the stable `(sign, [32-bit digits])` form, with
  `serialize`, `deserialize` and their unsigned counterparts.

## What it does not do

There is no random number generation, no command-line tool, and no mutable
integer: operations such as `with_bit` return a new value.

## Running the tests

```
pip install -e ".[test]"
pytest
```