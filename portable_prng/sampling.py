"""
Batch sampling helpers
======================

Pull many values from an engine into numpy arrays, with the same
``skip`` semantics as the CPU reference functions the engines grew out
of: `skip` values are drawn and discarded before the first kept value.

The engines stay scalar; these helpers only loop and collect.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict

import numpy as np

from .random_base import RandomBase32, RandomBase64

logger = logging.getLogger(__name__)

DOUBLE_METHODS = ('double', 'float', 'memcast')


def _skip(draw, skip: int) -> None:
    for _ in range(skip):
        draw()


def take_raw(engine: RandomBase32, n: int, skip: int = 0) -> np.ndarray:
    """
    Raw words in the engine's native width: uint64 for 64-bit engines,
    uint32 otherwise.
    """
    if isinstance(engine, RandomBase64):
        draw, dtype = engine.next_raw64, np.uint64
    else:
        draw, dtype = engine.next_raw32, np.uint32
    _skip(draw, skip)
    return np.array([draw() for _ in range(n)], dtype=dtype)


def take_doubles(engine: RandomBase32, n: int, skip: int = 0,
                 method: str = 'double') -> np.ndarray:
    """
    Doubles in [0, 1).

    method:
        'double'  - next_double()
        'float'   - next_float(), single-draw reduced precision
        'memcast' - next_double_memcast(), 64-bit engines only
    """
    if method == 'double':
        draw = engine.next_double
    elif method == 'float':
        draw = engine.next_float
    elif method == 'memcast':
        if not isinstance(engine, RandomBase64):
            raise ValueError(f"{type(engine).__name__} has no memcast conversion")
        draw = engine.next_double_memcast
    else:
        raise ValueError(f"Unknown method: {method}. Available: {list(DOUBLE_METHODS)}")
    _skip(draw, skip)
    return np.array([draw() for _ in range(n)], dtype=np.float64)


def take_ints(engine: RandomBase32, upper: int, n: int, skip: int = 0) -> np.ndarray:
    """next_int(upper) results; `skip` counts discarded results, not raw words."""
    _skip(lambda: engine.next_int(upper), skip)
    return np.array([engine.next_int(upper) for _ in range(n)], dtype=np.uint32)


def take_bools(engine: RandomBase32, n: int) -> np.ndarray:
    return np.array([engine.next_bool() for _ in range(n)], dtype=np.bool_)


def sample_statistics(values: np.ndarray) -> Dict[str, Any]:
    """Summary statistics of a sample, JSON-friendly."""
    arr = np.asarray(values)
    return {
        "sample_size": int(arr.size),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "min": arr.min().item(),
        "max": arr.max().item(),
    }


# ============================================================================
# Uniformity checks
# ============================================================================

@dataclass
class UniformityReport:
    """Frequencies observed over `sample_size` draws of each kind."""
    engine: str
    sample_size: int
    double_below_001: float     # fraction of next_double() < 0.01
    double_above_099: float     # fraction of next_double() > 0.99
    double_middle: float        # fraction in [0.495, 0.505)
    bool_true: float
    int10_zero: float           # fraction of next_int(10) == 0
    int10_nine: float

    @property
    def passed(self) -> bool:
        return (
            self.double_below_001 > 0.001
            and self.double_above_099 > 0.001
            and self.double_middle > 0.001
            and 0.4 < self.bool_true < 0.6
            and 0.08 < self.int10_zero < 0.12
            and 0.08 < self.int10_nine < 0.12
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['passed'] = self.passed
        return result


def uniformity_report(engine: RandomBase32, n: int) -> UniformityReport:
    """Draw n doubles, n bools and n next_int(10) values and tabulate them."""
    doubles = take_doubles(engine, n)
    bools = take_bools(engine, n)
    ints = take_ints(engine, 10, n)

    report = UniformityReport(
        engine=type(engine).__name__,
        sample_size=n,
        double_below_001=float(np.mean(doubles < 0.01)),
        double_above_099=float(np.mean(doubles > 0.99)),
        double_middle=float(np.mean((doubles >= 0.495) & (doubles < 0.505))),
        bool_true=float(np.mean(bools)),
        int10_zero=float(np.mean(ints == 0)),
        int10_nine=float(np.mean(ints == 9)),
    )
    logger.debug(f"Uniformity for {report.engine}: {report.to_dict()}")
    return report


def top_decile_fraction(engine: RandomBase32, upper: int, n: int) -> float:
    """Fraction of next_int(upper) results at or above 0.9 * upper."""
    ints = take_ints(engine, upper, n)
    return float(np.mean(ints >= upper * 0.9))
