#!/usr/bin/env python3
"""Engine registry lookups and factory."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portable_prng import (
    CANONICAL_SEEDS,
    ENGINE_REGISTRY,
    LIMITED_53BIT,
    RandomBase32,
    UnsupportedWidthError,
    Xoshiro128pp,
    canonical_seed,
    create_engine,
    get_engine_class,
    get_engine_info,
    list_available_prngs,
)


class TestLookups:

    def test_all_engines_registered(self):
        assert list_available_prngs() == [
            'xorshift32', 'xorshift64', 'xorshift128', 'xorshift128p',
            'splitmix64', 'mulberry32', 'xoshiro128pp', 'xoshiro256pp',
        ]

    @pytest.mark.parametrize("name", list(ENGINE_REGISTRY))
    def test_entry_is_consistent(self, name):
        info = get_engine_info(name)
        engine_class = info['engine_class']
        assert issubclass(engine_class, RandomBase32)
        assert engine_class.name == name
        assert info['state_size'] == engine_class.state_words * engine_class.word_bits // 8
        assert name in CANONICAL_SEEDS
        assert len(CANONICAL_SEEDS[name]) == engine_class.state_words

    def test_unknown_family(self):
        with pytest.raises(ValueError, match="Unknown PRNG family: mt19937"):
            get_engine_info('mt19937')
        with pytest.raises(ValueError, match="Available"):
            get_engine_class('pcg32')

    def test_unknown_canonical_seed(self):
        with pytest.raises(ValueError, match="No canonical seed"):
            canonical_seed('pcg32')


class TestCreateEngine:

    def test_deterministic(self):
        rng = create_engine('xoshiro128pp', deterministic=True)
        assert isinstance(rng, Xoshiro128pp)
        assert rng.next_raw32() == 641

    def test_explicit_seed(self):
        rng = create_engine('xorshift32', seed=314159265)
        assert rng.next_int(1000) == 119

    def test_entropy(self):
        a = create_engine('splitmix64')
        b = create_engine('splitmix64')
        assert a.state != b.state

    def test_seed_and_deterministic_conflict(self):
        with pytest.raises(ValueError, match="not both"):
            create_engine('xorshift32', seed=1, deterministic=True)

    def test_platform_forwarded(self):
        rng = create_engine('mulberry32', deterministic=True, platform=LIMITED_53BIT)
        assert rng.platform is LIMITED_53BIT
        with pytest.raises(UnsupportedWidthError):
            create_engine('xoshiro256pp', deterministic=True, platform=LIMITED_53BIT)
