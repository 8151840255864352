"""
Fixed-width integer helpers.

Python integers are unbounded, so every helper here masks explicitly and
the engines never see a value outside its word width.
"""

import numpy as np

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# IEEE-754 exponent bits of 1.0; OR-ing 52 mantissa bits gives a value in [1, 2)
DOUBLE_ONE_BITS = 0x3FF0000000000000


def uint32_to_int32(u: int) -> int:
    """Reinterpret a 32-bit unsigned pattern as signed two's complement."""
    u &= MASK32
    return u - 0x100000000 if u & 0x80000000 else u


def uint64_to_int64(u: int) -> int:
    """Reinterpret a 64-bit unsigned pattern as signed two's complement."""
    u &= MASK64
    return u - 0x10000000000000000 if u & 0x8000000000000000 else u


def unsigned_right_shift64(x: int, n: int) -> int:
    """
    Shift a 64-bit pattern right by n (0..63), filling with zero bits.

    Negative x is taken as its two's-complement pattern, so
    ``unsigned_right_shift64(-1, 60) == 0xF``.
    """
    return (x & MASK64) >> n


def to_hex_uint64(x: int) -> str:
    """Format a 64-bit pattern as 16 lowercase hex digits."""
    return format(x & MASK64, '016x')


def rotl32(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & MASK32


def rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


def uint64_bits_to_double(bits: int) -> float:
    """Reinterpret a 64-bit pattern as an IEEE-754 double, bit for bit."""
    return np.array(bits & MASK64, dtype=np.uint64).view(np.float64).item()
