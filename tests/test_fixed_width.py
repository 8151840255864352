#!/usr/bin/env python3
"""Fixed-width reinterpretation, shift and formatting helpers."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portable_prng.fixed_width import (
    rotl32,
    rotl64,
    to_hex_uint64,
    uint32_to_int32,
    uint64_bits_to_double,
    uint64_to_int64,
    unsigned_right_shift64,
)


class TestReinterpretation:

    @pytest.mark.parametrize("u, expected", [
        (0, 0),
        (1, 1),
        (0x7FFFFFFF, 2 ** 31 - 1),
        (0x80000000, -(2 ** 31)),
        (0xFFFFFFFF, -1),
        (0xFFFFFFFE, -2),
    ])
    def test_uint32_to_int32(self, u, expected):
        assert uint32_to_int32(u) == expected

    @pytest.mark.parametrize("u, expected", [
        (0, 0),
        (0x7FFFFFFFFFFFFFFF, 2 ** 63 - 1),
        (0x8000000000000000, -(2 ** 63)),
        (0xFFFFFFFFFFFFFFFF, -1),
    ])
    def test_uint64_to_int64(self, u, expected):
        assert uint64_to_int64(u) == expected

    def test_int32_roundtrip_keeps_bit_pattern(self):
        for u in (0, 1, 0x12345678, 0x80000000, 0xDEADBEEF, 0xFFFFFFFF):
            assert uint32_to_int32(u) & 0xFFFFFFFF == u


class TestUnsignedShift:

    def test_zero_fill_on_negative_pattern(self):
        assert unsigned_right_shift64(-1, 60) == 0xF
        assert unsigned_right_shift64(-1, 1) == 0x7FFFFFFFFFFFFFFF

    def test_top_bit(self):
        assert unsigned_right_shift64(0x8000000000000000, 63) == 1

    def test_shift_by_zero(self):
        assert unsigned_right_shift64(0xDEADBEEFCAFEBABE, 0) == 0xDEADBEEFCAFEBABE
        assert unsigned_right_shift64(-2, 0) == 0xFFFFFFFFFFFFFFFE

    def test_53_bit_extraction(self):
        assert unsigned_right_shift64(0xFFFFFFFFFFFFFFFF, 11) == 2 ** 53 - 1


class TestFormatting:

    @pytest.mark.parametrize("x, expected", [
        (0, "0000000000000000"),
        (1, "0000000000000001"),
        (0xDEADBEEFCAFEBABE, "deadbeefcafebabe"),
        (-1, "ffffffffffffffff"),
        (-(2 ** 63), "8000000000000000"),
    ])
    def test_to_hex_uint64(self, x, expected):
        assert to_hex_uint64(x) == expected


class TestRotations:

    def test_rotl32(self):
        assert rotl32(0x80000001, 1) == 0x00000003
        assert rotl32(0x12345678, 8) == 0x34567812
        assert rotl32(0x12345678, 31) == 0x091A2B3C

    def test_rotl64(self):
        assert rotl64(0x8000000000000001, 1) == 0x3
        assert rotl64(0x0123456789ABCDEF, 16) == 0x456789ABCDEF0123


class TestBitsToDouble:

    @pytest.mark.parametrize("bits, expected", [
        (0x0000000000000000, 0.0),
        (0x3FF0000000000000, 1.0),
        (0x3FF8000000000000, 1.5),
        (0x4000000000000000, 2.0),
        (0xBFF0000000000000, -1.0),
        (0x3FFFFFFFFFFFFFFF, 2.0 - 2.0 ** -52),
    ])
    def test_known_patterns(self, bits, expected):
        assert uint64_bits_to_double(bits) == expected

    def test_returns_python_float(self):
        assert type(uint64_bits_to_double(0x3FF0000000000000)) is float
