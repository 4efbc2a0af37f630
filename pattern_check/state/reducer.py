"""Reduce per-pattern results to a single step outcome."""

from typing import Iterable

from ..patterns.models import EvaluationResult
from .models import StepOutcome


def count_mismatches(results: Iterable[EvaluationResult]) -> int:
    """Number of results that did not match."""
    return sum(1 for result in results if not result.matched)


def reduce_outcome(results: Iterable[EvaluationResult]) -> StepOutcome:
    """
    Map evaluation results to a terminal outcome.

    Operational failures are handled by the caller before reduction, so the
    only outcomes produced here are CONTINUE and NO_PATTERN_MATCH.
    """
    if count_mismatches(results) > 0:
        return StepOutcome.NO_PATTERN_MATCH
    return StepOutcome.CONTINUE
