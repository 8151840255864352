from typing import Tuple

from ..fixed_width import MASK64
from ..random_base import RandomBase64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class Splitmix64(RandomBase64):
    """
    SplitMix64 (Steele, Lea & Flood 2014; Vigna's C version).

    A Weyl sequence pushed through two multiply-xorshift rounds. Any seed,
    zero included, gives a full-period sequence.
    """

    name = 'splitmix64'
    allows_zero_seed = True

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._x = words[0]

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._x,)

    def next_raw64(self) -> int:
        self._x = (self._x + GOLDEN_GAMMA) & MASK64
        z = self._x
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)
