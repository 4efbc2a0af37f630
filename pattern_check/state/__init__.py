"""
Step outcome reduction and step lifecycle.

Tracks a single step through PENDING → RUNNING → terminal state and maps
pattern results onto exactly one terminal outcome.
"""

from .lifecycle import StepLifecycle
from .models import StepOutcome, StepState, StepUpdate
from .reducer import count_mismatches, reduce_outcome

__all__ = [
    "StepLifecycle",
    "StepOutcome",
    "StepState",
    "StepUpdate",
    "count_mismatches",
    "reduce_outcome",
]
