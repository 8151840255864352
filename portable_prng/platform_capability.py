"""
Platform capability - does the host hold 64-bit integers exactly?
=================================================================

Usage:
    from portable_prng.platform_capability import get_platform_capability

    cap = get_platform_capability()       # detected once per process
    cap.require_int64('next_raw64')       # raises UnsupportedWidthError if not

Engines take an explicit capability so tests can simulate a 53-bit host:

    Xorshift32(seed=1, platform=LIMITED_53BIT)

Environment override (read on first detection only):
    PORTABLE_PRNG_INT64=0    -> behave like a 53-bit platform
    PORTABLE_PRNG_INT64=1    -> force native 64-bit behaviour
"""

import os
import logging
from functools import lru_cache
from typing import Literal

import numpy as np
from pydantic import BaseModel, ConfigDict

from .errors import UnsupportedWidthError
from .fixed_width import MASK64

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration
# ============================================================================

ENV_VAR = "PORTABLE_PRNG_INT64"

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_FALSY = {"0", "false", "f", "no", "n", "off"}


class PlatformCapability(BaseModel):
    """Immutable description of what integer widths the host supports."""
    model_config = ConfigDict(frozen=True)

    supports_int64: bool = True
    source: Literal["detected", "environment", "explicit"] = "explicit"

    def require_int64(self, operation: str) -> None:
        if not self.supports_int64:
            raise UnsupportedWidthError(operation)


NATIVE_INT64 = PlatformCapability(supports_int64=True)
LIMITED_53BIT = PlatformCapability(supports_int64=False)


# ============================================================================
# Detection - resolve ONCE per process
# ============================================================================

def _probe_int64() -> bool:
    # Memory-cast doubles go through a numpy uint64 -> float64 view, so the
    # probe checks that path rather than Python's unbounded int.
    try:
        word = np.array(MASK64, dtype=np.uint64)
    except OverflowError:
        return False
    return int(word) == MASK64 and word.itemsize == np.dtype(np.float64).itemsize


def _parse_override(raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(
        f"{ENV_VAR} must be one of {sorted(_TRUTHY | _FALSY)}, got '{raw}'"
    )


@lru_cache(maxsize=1)
def get_platform_capability() -> PlatformCapability:
    """
    Process-wide default capability.

    Cached: the environment override and the probe are evaluated on the
    first call only.
    """
    raw = os.environ.get(ENV_VAR)
    if raw is not None and raw.strip():
        supported = _parse_override(raw)
        logger.debug(f"{ENV_VAR}={raw!r} -> supports_int64={supported}")
        return PlatformCapability(supports_int64=supported, source="environment")

    supported = _probe_int64()
    logger.debug(f"Detected 64-bit integer support: {supported}")
    return PlatformCapability(supports_int64=supported, source="detected")


def clear_capability_cache():
    """Forget the detected capability (for testing or config reload)."""
    get_platform_capability.cache_clear()


def resolve_capability(platform=None) -> PlatformCapability:
    """Return `platform` when given, else the process-wide default."""
    return platform if platform is not None else get_platform_capability()
