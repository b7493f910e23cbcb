"""
Shared compute infrastructure for PyLinear.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinear.core.compute.timing import Timer, timed
from pylinear.core.compute.tolerances import (
    FLOAT_FP64,
    INT_EXACT,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "INT_EXACT",
    "FLOAT_FP64",
    "select_tolerance",
]
