#!/usr/bin/env python3
"""
PRNG Registry
=============

Name -> engine lookup for every engine in the package, so callers (and
the test-suite) can iterate over all of them without importing each class.

Usage:
    from portable_prng.prng_registry import create_engine, list_available_prngs

    rng = create_engine('xoshiro128pp', deterministic=True)
    rng.next_int(6)
"""

import logging
from typing import Any, Dict, List, Optional

from .engines import (
    Mulberry32,
    Splitmix64,
    Xorshift32,
    Xorshift64,
    Xorshift128,
    Xorshift128p,
    Xoshiro128pp,
    Xoshiro256pp,
)
from .platform_capability import PlatformCapability
from .random_base import RandomBase32
from .seeds import SeedLike

logger = logging.getLogger(__name__)


# ============================================================================
# ENGINE REGISTRY
# ============================================================================

ENGINE_REGISTRY = {
    'xorshift32': {
        'engine_class': Xorshift32,
        'description': 'Xorshift32, shifts (13, 17, 5)',
        'seed_type': 'uint32',
        'state_size': 4,
    },
    'xorshift64': {
        'engine_class': Xorshift64,
        'description': 'Xorshift64, shifts (13, 7, 17)',
        'seed_type': 'uint64',
        'state_size': 8,
    },
    'xorshift128': {
        'engine_class': Xorshift128,
        'description': "Marsaglia's xor128, four 32-bit words",
        'seed_type': 'uint32[4]',
        'state_size': 16,
    },
    'xorshift128p': {
        'engine_class': Xorshift128p,
        'description': 'Xorshift128+, shifts (23, 17, 26), additive output',
        'seed_type': 'uint64[2]',
        'state_size': 16,
    },
    'splitmix64': {
        'engine_class': Splitmix64,
        'description': 'SplitMix64 Weyl sequence with mixing rounds',
        'seed_type': 'uint64',
        'state_size': 8,
    },
    'mulberry32': {
        'engine_class': Mulberry32,
        'description': 'Mulberry32 Weyl counter with mixing output',
        'seed_type': 'uint32',
        'state_size': 4,
    },
    'xoshiro128pp': {
        'engine_class': Xoshiro128pp,
        'description': 'xoshiro128++ 1.0',
        'seed_type': 'uint32[4]',
        'state_size': 16,
    },
    'xoshiro256pp': {
        'engine_class': Xoshiro256pp,
        'description': 'xoshiro256++ 1.0',
        'seed_type': 'uint64[4]',
        'state_size': 32,
    },
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_engine_info(prng_family: str) -> Dict[str, Any]:
    """Get registry entry for PRNG family"""
    if prng_family not in ENGINE_REGISTRY:
        raise ValueError(f"Unknown PRNG family: {prng_family}. Available: {list_available_prngs()}")
    return ENGINE_REGISTRY[prng_family]


def list_available_prngs() -> List[str]:
    """List all available PRNG families"""
    return list(ENGINE_REGISTRY.keys())


def get_engine_class(prng_family: str) -> type:
    """Get engine class for PRNG family"""
    return get_engine_info(prng_family)['engine_class']


def create_engine(prng_family: str,
                  seed: Optional[SeedLike] = None,
                  deterministic: bool = False,
                  platform: Optional[PlatformCapability] = None) -> RandomBase32:
    """
    Build an engine by name.

    deterministic=True uses the canonical seed and cannot be combined with
    an explicit seed. With neither, the engine is seeded from os.urandom.
    """
    engine_class = get_engine_class(prng_family)
    if deterministic:
        if seed is not None:
            raise ValueError("Pass either seed or deterministic=True, not both")
        logger.debug(f"Creating {prng_family} from its canonical seed")
        return engine_class.expected(platform=platform)
    return engine_class(seed=seed, platform=platform)


if __name__ == '__main__':
    print("PRNG Registry")
    print("=" * 50)
    print("\nAvailable PRNGs:")
    for name in list_available_prngs():
        info = get_engine_info(name)
        engine_class = info['engine_class']
        print(f"  {name:12} - {info['description']}")
        print(f"               State: {info['state_size']} bytes ({info['seed_type']}), "
              f"{engine_class.word_bits}-bit output")
