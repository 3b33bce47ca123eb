"""Graph analysis for dependency validation.

Provides cycle detection over built dependency graphs.

Python 3.13+.
"""

from .cycles import CycleDetector, VisitState, has_cycle

__all__ = [
    "CycleDetector",
    "VisitState",
    "has_cycle",
]
