"""
portable_prng - reproducible PRNG engines

Every engine produces the same sequence for the same seed on every
platform, including hosts whose integers only hold 53 significant bits
(64-bit engines refuse to run there instead of drifting).

Usage:
    from portable_prng import Xorshift32, Xoshiro256pp

    rng = Xorshift32.expected()
    rng.next_int(1000)          # 119, then 240, then 369
    rng.next_double()
    rng.next_bool()

    rng64 = Xoshiro256pp(seed=(1, 2, 3, 4))
    rng64.next_double_memcast()
"""

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
from .errors import PRNGError, RangeError, SeedError, UnsupportedWidthError
from .platform_capability import (
    LIMITED_53BIT,
    NATIVE_INT64,
    PlatformCapability,
    clear_capability_cache,
    get_platform_capability,
)
from .prng_registry import (
    ENGINE_REGISTRY,
    create_engine,
    get_engine_class,
    get_engine_info,
    list_available_prngs,
)
from .random_base import RandomBase32, RandomBase64
from .sampling import (
    UniformityReport,
    sample_statistics,
    take_bools,
    take_doubles,
    take_ints,
    take_raw,
    uniformity_report,
)
from .seeds import CANONICAL_SEEDS, canonical_seed

__version__ = "1.0.0"
__all__ = [
    'Mulberry32',
    'Splitmix64',
    'Xorshift32',
    'Xorshift64',
    'Xorshift128',
    'Xorshift128p',
    'Xoshiro128pp',
    'Xoshiro256pp',
    'RandomBase32',
    'RandomBase64',
    'PRNGError',
    'RangeError',
    'SeedError',
    'UnsupportedWidthError',
    'PlatformCapability',
    'NATIVE_INT64',
    'LIMITED_53BIT',
    'get_platform_capability',
    'clear_capability_cache',
    'ENGINE_REGISTRY',
    'create_engine',
    'get_engine_class',
    'get_engine_info',
    'list_available_prngs',
    'CANONICAL_SEEDS',
    'canonical_seed',
    'UniformityReport',
    'sample_statistics',
    'take_bools',
    'take_doubles',
    'take_ints',
    'take_raw',
    'uniformity_report',
]
