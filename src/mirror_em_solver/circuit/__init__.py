"""Circuit post-processing of the inductance matrix."""

from .current_sharing import CurrentGroup, CurrentSharingResult, solve_current_sharing
from .twisting import solve_twisting

__all__ = [
    "CurrentGroup",
    "CurrentSharingResult",
    "solve_current_sharing",
    "solve_twisting",
]
