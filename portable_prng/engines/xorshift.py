"""
Xorshift family engines
=======================

Marsaglia, "Xorshift RNGs", Journal of Statistical Software 8(14), 2003,
plus the xorshift128+ variant. None of these accept an all-zero seed:
a zero state is a fixed point of every recurrence here.
"""

from typing import Tuple

from ..fixed_width import MASK32, MASK64
from ..random_base import RandomBase32, RandomBase64


class Xorshift32(RandomBase32):
    """Xorshift32, shift triple (13, 17, 5). Never outputs zero."""

    name = 'xorshift32'

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._x = words[0]

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._x,)

    def next_raw32(self) -> int:
        x = self._x
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self._x = x
        return x


class Xorshift64(RandomBase64):
    """Xorshift64, shift triple (13, 7, 17). Never outputs zero."""

    name = 'xorshift64'

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._x = words[0]

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._x,)

    def next_raw64(self) -> int:
        x = self._x
        x ^= (x << 13) & MASK64
        x ^= x >> 7
        x ^= (x << 17) & MASK64
        self._x = x
        return x


class Xorshift128(RandomBase32):
    """
    Xorshift128 (Marsaglia's xor128) over four 32-bit words.

    Seed words are (x, y, z, w) in that order; the output is the new w.
    """

    name = 'xorshift128'
    state_words = 4

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._x, self._y, self._z, self._w = words

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._x, self._y, self._z, self._w)

    def next_raw32(self) -> int:
        t = (self._x ^ (self._x << 11)) & MASK32
        self._x, self._y, self._z = self._y, self._z, self._w
        w = self._w
        self._w = w ^ (w >> 19) ^ (t ^ (t >> 8))
        return self._w


class Xorshift128p(RandomBase64):
    """
    Xorshift128+ over two 64-bit words, shift triple (23, 17, 26).

    The output is the 64-bit sum of the two updated words; the sum, not a
    XOR, is what makes this the "+" variant.
    """

    name = 'xorshift128p'
    state_words = 2

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._a, self._b = words

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._a, self._b)

    def next_raw64(self) -> int:
        s1 = self._a
        s0 = self._b
        self._a = s0
        s1 ^= (s1 << 23) & MASK64
        s1 ^= s1 >> 17
        s1 ^= s0
        s1 ^= s0 >> 26
        self._b = s1
        return (self._a + self._b) & MASK64
