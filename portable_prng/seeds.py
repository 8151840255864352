"""
Seed table and seed handling
============================

CANONICAL_SEEDS holds the fixed seed every ``expected()`` constructor uses.
These values are part of the public contract: changing one changes every
reference sequence derived from it.

Provenance:
    xorshift32    digits of pi
    xorshift64    Marsaglia, "Xorshift RNGs" (2003), xor64 example
    xorshift128   Marsaglia, "Xorshift RNGs" (2003), xor128 example
    xorshift128p  first two splitmix64 outputs for seed 1234567
    splitmix64    Vigna's reference test seed
    mulberry32    same pi digits as xorshift32
    xoshiro*pp    {1, 2, 3, 4}, the reference test seed
"""

import numbers
import os
import logging
from typing import Dict, Sequence, Tuple, Union

from .errors import SeedError

logger = logging.getLogger(__name__)

SeedLike = Union[int, Sequence[int]]

CANONICAL_SEEDS: Dict[str, Tuple[int, ...]] = {
    'xorshift32': (314159265,),
    'xorshift64': (88172645463325252,),
    'xorshift128': (123456789, 362436069, 521288629, 88675123),
    'xorshift128p': (6457827717110365317, 3203168211198807973),
    'splitmix64': (1234567,),
    'mulberry32': (314159265,),
    'xoshiro128pp': (1, 2, 3, 4),
    'xoshiro256pp': (1, 2, 3, 4),
}


def canonical_seed(prng_family: str) -> Tuple[int, ...]:
    """Get the canonical deterministic seed words for a PRNG family"""
    if prng_family not in CANONICAL_SEEDS:
        raise ValueError(
            f"No canonical seed for PRNG family: {prng_family}. "
            f"Available: {list(CANONICAL_SEEDS.keys())}"
        )
    return CANONICAL_SEEDS[prng_family]


def entropy_words(count: int, bits: int, allow_zero: bool = True) -> Tuple[int, ...]:
    """
    Draw `count` words of `bits` width from os.urandom.

    With allow_zero=False the draw is repeated until at least one word is
    non-zero.
    """
    nbytes = bits // 8
    while True:
        words = tuple(
            int.from_bytes(os.urandom(nbytes), 'little') for _ in range(count)
        )
        if allow_zero or any(words):
            logger.debug(f"Seeded {count}x{bits}-bit state from os.urandom")
            return words


def is_integer_word(value) -> bool:
    """True for int-like values (numpy integers included), never for bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def normalize_seed(seed: SeedLike, count: int, bits: int,
                   allow_zero: bool, engine: str) -> Tuple[int, ...]:
    """
    Validate an explicit seed and return it as a tuple of plain ints.

    Single-word engines accept a bare integer. numpy integers are accepted
    and converted. Words must already fit the word width; nothing is
    silently truncated.
    """
    if is_integer_word(seed):
        words = (seed,)
    else:
        try:
            words = tuple(seed)
        except TypeError:
            raise SeedError(
                f"{engine} seed must be an int or a sequence of ints, got {seed!r}"
            ) from None

    if len(words) != count:
        raise SeedError(f"{engine} needs {count} seed word(s), got {len(words)}")

    limit = 1 << bits
    checked = []
    for i, word in enumerate(words):
        if not is_integer_word(word):
            raise SeedError(f"{engine} seed word {i} must be an int, got {word!r}")
        word = int(word)
        if not 0 <= word < limit:
            raise SeedError(
                f"{engine} seed word {i} out of range: {word} "
                f"(expected 0..0x{limit - 1:X})"
            )
        checked.append(word)
    words = tuple(checked)

    if not allow_zero and not any(words):
        raise SeedError(
            f"{engine} cannot be seeded with all zeros: "
            f"the recurrence would output zero forever"
        )
    return words
