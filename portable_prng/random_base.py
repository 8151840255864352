"""
RandomBase32 / RandomBase64 - shared conversion layer
=====================================================

An engine implements exactly one primitive:

    RandomBase32 subclasses -> next_raw32()
    RandomBase64 subclasses -> next_raw64()

and gets every derived operation (bounded ints, doubles, floats, bools,
53/64-bit combinations) from the base class. All conversions are exact,
so the same seed gives the same values on every platform that supports
the engine.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .errors import RangeError
from .fixed_width import (
    DOUBLE_ONE_BITS,
    MASK32,
    uint32_to_int32,
    uint64_to_int64,
    uint64_bits_to_double,
    unsigned_right_shift64,
)
from .platform_capability import PlatformCapability, resolve_capability
from .seeds import (
    SeedLike,
    canonical_seed,
    entropy_words,
    is_integer_word,
    normalize_seed,
)

# Exact powers of two
_TWO_POW_M32 = 2.3283064365386963e-10    # 2**-32
_TWO_POW_M52 = 2.220446049250313e-16     # 2**-52
_TWO_POW_M53 = 1.1102230246251565e-16    # 2**-53

# J. Doornik, "Conversion of high-period random numbers to floating point" (2005)
M_RAN_INVM32 = 2.32830643653869628906e-10


class RandomBase32(ABC):
    """
    Base for engines whose native output word is 32 bits.

    Subclasses set the class attributes below and implement next_raw32(),
    _set_state() and the state property.

    Not thread-safe: one instance per caller.
    """

    name: str = ''                  # registry and seed-table key
    word_bits: int = 32
    state_words: int = 1
    allows_zero_seed: bool = False  # all-zero seed is degenerate for xorshift-style recurrences
    requires_int64: bool = False

    def __init__(self, seed: Optional[SeedLike] = None,
                 platform: Optional[PlatformCapability] = None):
        self._platform = resolve_capability(platform)
        if self.requires_int64:
            self._platform.require_int64(type(self).__name__)

        if seed is None:
            words = entropy_words(self.state_words, self.word_bits, self.allows_zero_seed)
        else:
            words = normalize_seed(seed, self.state_words, self.word_bits,
                                   self.allows_zero_seed, type(self).__name__)
        self._set_state(words)

        # bool cache: last raw word and the index of the last bit returned
        self._bool_cache = 0
        self._bool_shift = 0

    @classmethod
    def expected(cls, platform: Optional[PlatformCapability] = None):
        """Engine seeded with its canonical seed; same sequence everywhere."""
        return cls(seed=canonical_seed(cls.name), platform=platform)

    deterministic = expected

    @property
    def platform(self) -> PlatformCapability:
        return self._platform

    @property
    @abstractmethod
    def state(self) -> Tuple[int, ...]:
        """Current state words, for diagnostics."""
        pass

    @abstractmethod
    def _set_state(self, words: Tuple[int, ...]) -> None:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(state={self.state!r})"

    # ------------------------------------------------------------------
    # Raw words
    # ------------------------------------------------------------------

    @abstractmethod
    def next_raw32(self) -> int:
        """
        Next raw 32-bit output of the recurrence, in 0..0xFFFFFFFF.

        Individual algorithms may never reach some values; xorshift
        generators never return zero.
        """
        pass

    def next_raw64(self) -> int:
        """
        Two raw 32-bit draws combined into one 64-bit word, the first draw
        in the high half.

        Raises UnsupportedWidthError, without drawing, on a platform that
        lacks 64-bit integers.
        """
        self._platform.require_int64('next_raw64')
        return (self.next_raw32() << 32) | self.next_raw32()

    def next_raw53(self) -> int:
        """Uniform integer in [0, 2**53)."""
        if self._platform.supports_int64:
            return unsigned_right_shift64(self.next_raw64(), 11)
        # (hi << 21) | (lo >> 11) without ever exceeding 53 bits
        hi = self.next_raw32()
        lo = self.next_raw32()
        return hi * 0x200000 + (lo >> 11)

    def next_int32(self) -> int:
        """One raw 32-bit draw as a signed integer in [-2**31, 2**31)."""
        return uint32_to_int32(self.next_raw32())

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def next_int(self, upper: int) -> int:
        """
        Uniform integer in [0, upper), 1 <= upper <= 0xFFFFFFFF.

        Debiased modulo once: a draw from the incomplete top block of size
        `upper` is rejected and redrawn. Each redraw happens with
        probability below 1/2, so the loop ends with probability one but
        has no fixed worst-case bound.
        """
        if not is_integer_word(upper) or not 1 <= int(upper) <= MASK32:
            raise RangeError(upper, 1, MASK32, name='upper')
        upper = int(upper)

        m = upper - 1
        u = self.next_raw32()
        r = u % upper
        while u - r + m > MASK32:
            u = self.next_raw32()
            r = u % upper
        return r

    def next_double(self) -> float:
        """
        Uniform double in [0.0, 1.0) from two raw draws.

        Only 32-bit integer operations are involved, so the result is the
        same on platforms without 64-bit integers.
        """
        return self.next_raw32() * _TWO_POW_M32 + (self.next_raw32() >> 12) * _TWO_POW_M52

    def next_float(self) -> float:
        """
        Uniform double in [0.0, 1.0) from a single raw draw.

        Faster than next_double() but limited to 2**32 distinct values.
        """
        return uint32_to_int32(self.next_raw32()) * M_RAN_INVM32 + 0.5

    def next_bool(self) -> bool:
        """Random bool; one raw draw yields 32 results, highest bit first."""
        if self._bool_shift == 0:
            self._bool_cache = self.next_raw32()
            self._bool_shift = 31
            return (self._bool_cache & 0x80000000) != 0
        self._bool_shift -= 1
        return (self._bool_cache >> self._bool_shift) & 1 == 1


class RandomBase64(RandomBase32):
    """
    Base for engines whose native output word is 64 bits.

    These engines cannot be constructed on a 53-bit platform. The 32-bit
    view used by next_int(), next_bool() and next_float() is the upper half
    of a 64-bit draw; the lower half is discarded.
    """

    word_bits = 64
    requires_int64 = True

    @abstractmethod
    def next_raw64(self) -> int:
        """Next raw 64-bit output of the recurrence, in 0..2**64-1."""
        pass

    def next_raw32(self) -> int:
        return self.next_raw64() >> 32

    def next_raw53(self) -> int:
        return unsigned_right_shift64(self.next_raw64(), 11)

    def next_double(self) -> float:
        """
        Uniform double in [0.0, 1.0) with 53 bits from one draw.

        Equal to (raw >> 11) * 2**-53, computed from the 32-bit halves.
        """
        raw = self.next_raw64()
        return (raw >> 32) * _TWO_POW_M32 + ((raw & MASK32) >> 11) * _TWO_POW_M53

    def next_double_memcast(self) -> float:
        """
        Uniform double in [0.0, 1.0) built by placing the top 52 bits of a
        raw draw into the mantissa of a double in [1.0, 2.0) and
        subtracting 1.0.
        """
        self._platform.require_int64('next_double_memcast')
        raw = self.next_raw64()
        return uint64_bits_to_double(DOUBLE_ONE_BITS | (raw >> 12)) - 1.0

    def next_int64(self) -> int:
        """One raw draw as a signed 64-bit integer."""
        self._platform.require_int64('next_int64')
        return uint64_to_int64(self.next_raw64())
