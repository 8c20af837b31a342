"""Arbitrary-precision signed integers with sign-and-magnitude, radix, byte and bit conversions."""

__version__ = "0.1.0"

__all__ = ["bigint", "bits", "convert", "integer", "radix", "serialize", "sign"]