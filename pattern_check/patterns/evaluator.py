"""
Pattern evaluator.

Serializes a payload once, resolves every pattern key against it and
applies the pattern operator. All patterns are evaluated, even after a
mismatch, so callers always get a complete result list.
"""

import json
from typing import Any, Callable, Optional, Sequence

from ..config.defaults import PatternCheckConfig, get_default_config
from ..errors import SerializationError, UnsupportedOperatorError
from ..logging.config import get_evaluation_logger, log_pattern_result
from .models import EvaluationResult, Pattern, PatternOperator
from .path import resolve_path

evaluation_logger = get_evaluation_logger(__name__)

ResultCallback = Callable[[EvaluationResult], None]


def serialize_payload(payload: Any) -> str:
    """
    Serialize a payload to canonical compact JSON.

    Args:
        payload: Arbitrary nested mapping/sequence/scalar data

    Returns:
        JSON string with sorted keys and no insignificant whitespace

    Raises:
        SerializationError: Cyclic, non-JSON or non-finite values
    """
    try:
        return json.dumps(
            payload,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Payload is not JSON serializable: {e}",
            payload_type=type(payload).__name__
        ) from e


def compare(operator: PatternOperator, resolved: str, expected: str) -> bool:
    """Apply an operator to the string forms of resolved and expected values."""
    if operator == PatternOperator.EQUALS:
        return resolved == expected
    if operator == PatternOperator.NOT_EQUALS:
        return resolved != expected
    # Unknown operators never reject a payload
    return True


class PatternEvaluator:
    """Evaluates an ordered list of patterns against a payload."""

    def __init__(self, config: Optional[PatternCheckConfig] = None):
        self.config = config or get_default_config()
        self.logger = evaluation_logger

    def evaluate(
        self,
        payload: Any,
        patterns: Sequence[Pattern],
        on_result: Optional[ResultCallback] = None,
        step_id: Optional[str] = None
    ) -> list[EvaluationResult]:
        """
        Evaluate patterns against a payload.

        Args:
            payload: Structured event data, read-only
            patterns: Patterns in evaluation order
            on_result: Called with each result before the next pattern is
                evaluated; exceptions it raises abort the evaluation
            step_id: Step identifier used for log context

        Returns:
            One EvaluationResult per pattern, in input order

        Raises:
            SerializationError: If the payload cannot be serialized
            UnsupportedOperatorError: Unknown operator with strict_operators
        """
        document = json.loads(serialize_payload(payload))
        results = []

        for pattern in patterns:
            result = self.evaluate_pattern(document, pattern, step_id=step_id)
            results.append(result)

            if on_result is not None:
                on_result(result)

        return results

    def evaluate_pattern(
        self,
        document: Any,
        pattern: Pattern,
        step_id: Optional[str] = None
    ) -> EvaluationResult:
        """Evaluate a single pattern against an already parsed document."""
        operator = pattern.operator

        if operator == PatternOperator.UNKNOWN:
            if self.config.strict_operators:
                raise UnsupportedOperatorError(
                    f"Unsupported pattern type '{pattern.type}' for key '{pattern.key}'",
                    operator=pattern.type,
                    key=pattern.key
                )
            if self.config.warn_unknown_operators:
                self.logger.warning(
                    "Unsupported pattern type, treating as matched",
                    pattern_key=pattern.key,
                    pattern_type=pattern.type,
                    step_id=step_id
                )

        resolved = resolve_path(document, pattern.key)
        resolved_string = resolved.string
        matched = compare(operator, resolved_string, pattern.value)

        log_pattern_result(
            self.logger,
            key=pattern.key,
            operator=operator.value,
            expected_value=pattern.value,
            resolved_value=resolved_string,
            matched=matched,
            step_id=step_id,
            context=None if resolved.exists else {"path_exists": False}
        )

        return EvaluationResult(
            pattern=pattern,
            operator=operator,
            resolved_value=resolved_string,
            matched=matched,
            exists=resolved.exists,
        )
