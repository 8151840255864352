"""
Concrete PRNG engines.

Each class implements one primitive (next_raw32 or next_raw64); the rest
comes from portable_prng.random_base.
"""
from .mulberry import Mulberry32
from .splitmix import Splitmix64
from .xorshift import Xorshift32, Xorshift64, Xorshift128, Xorshift128p
from .xoshiro import Xoshiro128pp, Xoshiro256pp

__all__ = [
    'Mulberry32',
    'Splitmix64',
    'Xorshift32',
    'Xorshift64',
    'Xorshift128',
    'Xorshift128p',
    'Xoshiro128pp',
    'Xoshiro256pp',
]
