"""
Error kinds raised by the PRNG engines.

Two runtime conditions exist: a bad bound passed to ``next_int`` and a
64-bit operation on a platform that cannot hold 64-bit integers exactly.
Seed problems are caught at construction time.
"""

from typing import Optional


class PRNGError(Exception):
    """Base class for every error raised by portable_prng."""
    pass


class RangeError(PRNGError, ValueError):
    """
    Raised when a bounded-integer request receives an illegal bound.

    Attributes:
        value: The rejected value
        min_value: Smallest legal value (inclusive)
        max_value: Largest legal value (inclusive)
        name: Name of the offending argument
    """

    def __init__(self, value, min_value: int, max_value: int, name: str = "upper"):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        self.name = name
        super().__init__(
            f"Invalid value for {name}: {value!r}. "
            f"Valid range is {min_value}..{max_value} (0x{max_value:X}), inclusive"
        )


class UnsupportedWidthError(PRNGError, RuntimeError):
    """
    Raised when full 64-bit behaviour is requested on a platform whose
    integers only hold 53 significant bits.

    The condition is static for the lifetime of a capability value, so
    callers should not retry.
    """

    def __init__(self, operation: Optional[str] = None):
        self.operation = operation
        what = f"'{operation}'" if operation else "This operation"
        super().__init__(
            f"{what} requires exact 64-bit integer arithmetic, "
            f"which the current platform capability does not provide"
        )


class SeedError(PRNGError, ValueError):
    """Raised when an engine is constructed from an unusable seed."""
    pass
