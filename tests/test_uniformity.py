#!/usr/bin/env python3
"""
Statistical sanity checks run against every engine.

The default run draws 200,000 values per check. The same thresholds over
the full 10,000,000 draws live in TestFullSampleUniformity, marked `slow`
and deselected by default; run them with `pytest -m slow`.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portable_prng import (
    RangeError,
    create_engine,
    list_available_prngs,
    take_doubles,
    take_ints,
    uniformity_report,
)

N = 200_000
FULL_N = 10_000_000

ALL_ENGINES = list_available_prngs()


class TestCommonRandom:

    @pytest.mark.parametrize("name", ALL_ENGINES)
    def test_doubles_in_unit_interval(self, name):
        for method in ("double", "float"):
            arr = take_doubles(create_engine(name), N // 10, method=method)
            assert arr.min() >= 0.0
            assert arr.max() < 1.0

    @pytest.mark.parametrize("name", ALL_ENGINES)
    def test_frequencies(self, name):
        report = uniformity_report(create_engine(name), N)
        assert report.double_below_001 > 0.001
        assert report.double_above_099 > 0.001
        assert report.double_middle > 0.001
        assert 0.4 < report.bool_true < 0.6
        assert 0.08 < report.int10_zero < 0.12
        assert 0.08 < report.int10_nine < 0.12
        assert report.passed

    @pytest.mark.parametrize("name", ALL_ENGINES)
    @pytest.mark.parametrize("upper", [0xFFFFFFFF, 0x80000000])
    def test_huge_bounds(self, name, upper):
        """Results never reach `upper`, and the top tenth is well populated."""
        ints = take_ints(create_engine(name), upper, N)
        assert int(ints.max()) < upper
        assert float(np.mean(ints >= upper * 0.9)) > 0.05

    @pytest.mark.parametrize("name", ALL_ENGINES)
    @pytest.mark.parametrize("upper", [1, 2, 3, 7, 10, 1000, 0x7FFFFFFF, 0x80000001])
    def test_results_below_upper(self, name, upper):
        rng = create_engine(name)
        for _ in range(2000):
            assert 0 <= rng.next_int(upper) < upper

    @pytest.mark.parametrize("name", ALL_ENGINES)
    def test_next_int_range_checks(self, name):
        rng = create_engine(name)
        for bad in (-1, 0, 0xFFFFFFFF + 1):
            with pytest.raises(RangeError):
                rng.next_int(bad)
        # boundaries are legal
        assert rng.next_int(1) == 0
        assert rng.next_int(0xFFFFFFFF) < 0xFFFFFFFF


@pytest.mark.slow
class TestFullSampleUniformity:
    """Same frequency and large-bound thresholds over 10,000,000 draws."""

    @pytest.mark.parametrize("name", ALL_ENGINES)
    def test_frequencies(self, name):
        assert uniformity_report(create_engine(name), FULL_N).passed

    @pytest.mark.parametrize("name", ALL_ENGINES)
    @pytest.mark.parametrize("upper", [0xFFFFFFFF, 0x80000000])
    def test_huge_bounds(self, name, upper):
        ints = take_ints(create_engine(name), upper, FULL_N)
        assert int(ints.max()) < upper
        assert float(np.mean(ints >= upper * 0.9)) > 0.05
