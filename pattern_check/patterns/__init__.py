"""Pattern evaluation: models, payload path resolution and operator dispatch"""

from .evaluator import PatternEvaluator, serialize_payload
from .models import EvaluationResult, Pattern, PatternOperator
from .path import ResolvedValue, resolve_path, split_path, to_comparable_string

__all__ = [
    "PatternEvaluator",
    "Pattern",
    "PatternOperator",
    "EvaluationResult",
    "ResolvedValue",
    "serialize_payload",
    "resolve_path",
    "split_path",
    "to_comparable_string",
]
