"""
Xoshiro++ engines (Blackman & Vigna, "Scrambled linear pseudorandom
number generators", 2018).
"""

from typing import Tuple

from ..fixed_width import MASK32, MASK64, rotl32, rotl64
from ..random_base import RandomBase32, RandomBase64


class Xoshiro128pp(RandomBase32):
    """xoshiro128++ 1.0: four 32-bit words, all-zero seed rejected."""

    name = 'xoshiro128pp'
    state_words = 4

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._s = list(words)

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self._s)

    def next_raw32(self) -> int:
        s = self._s
        result = (rotl32((s[0] + s[3]) & MASK32, 7) + s[0]) & MASK32
        t = (s[1] << 9) & MASK32

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl32(s[3], 11)
        return result


class Xoshiro256pp(RandomBase64):
    """xoshiro256++ 1.0: four 64-bit words, all-zero seed rejected."""

    name = 'xoshiro256pp'
    state_words = 4

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._s = list(words)

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self._s)

    def next_raw64(self) -> int:
        s = self._s
        result = (rotl64((s[0] + s[3]) & MASK64, 23) + s[0]) & MASK64
        t = (s[1] << 17) & MASK64

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl64(s[3], 45)
        return result
