from typing import Tuple

from ..fixed_width import MASK32
from ..random_base import RandomBase32


class Mulberry32(RandomBase32):
    """Mulberry32 (Tommy Ettinger): a 32-bit Weyl counter with a mixing output."""

    name = 'mulberry32'
    allows_zero_seed = True

    def _set_state(self, words: Tuple[int, ...]) -> None:
        self._x = words[0]

    @property
    def state(self) -> Tuple[int, ...]:
        return (self._x,)

    def next_raw32(self) -> int:
        self._x = (self._x + 0x6D2B79F5) & MASK32
        z = self._x
        z = ((z ^ (z >> 15)) * (z | 1)) & MASK32
        z ^= (z + ((z ^ (z >> 7)) * (z | 61))) & MASK32
        return z ^ (z >> 14)
