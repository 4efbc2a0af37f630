"""
Pattern data models.

Patterns are immutable rules supplied by the caller; evaluation results
are produced fresh for every evaluation and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from ..errors import ConfigurationError
from .path import to_comparable_string


class PatternOperator(str, Enum):
    """Comparison operators understood by the evaluator."""
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Any) -> "PatternOperator":
        """Map a raw operator string to an operator; anything else is UNKNOWN."""
        if raw == cls.EQUALS.value:
            return cls.EQUALS
        if raw == cls.NOT_EQUALS.value:
            return cls.NOT_EQUALS
        return cls.UNKNOWN

    @property
    def symbol(self) -> str:
        return _OPERATOR_SYMBOLS[self]


_OPERATOR_SYMBOLS = {
    PatternOperator.EQUALS: "==",
    PatternOperator.NOT_EQUALS: "!=",
    PatternOperator.UNKNOWN: "?",
}


@dataclass(frozen=True)
class Pattern:
    """A rule comparing one payload field to an expected value."""
    key: str
    type: str
    value: str

    @property
    def operator(self) -> PatternOperator:
        return PatternOperator.parse(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Pattern":
        """
        Build a pattern from a flow definition entry.

        Scalar values are converted with the same rules used for resolved
        payload fields, so ``True`` compares equal to ``"true"``.

        Raises:
            ConfigurationError: If data is not a mapping or the key is not a string
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Pattern must be a mapping, got {type(data).__name__}")

        key = data.get("key")
        if not isinstance(key, str):
            raise ConfigurationError("Pattern key must be a string", context={"pattern": dict(data)})

        operator = data.get("type", "")
        return cls(
            key=key,
            type=operator if isinstance(operator, str) else str(operator),
            value=to_comparable_string(data.get("value")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "type": self.type, "value": self.value}


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one pattern against a payload."""
    pattern: Pattern
    operator: PatternOperator
    resolved_value: str
    matched: bool
    exists: bool = True

    @property
    def key(self) -> str:
        return self.pattern.key

    @property
    def expected_value(self) -> str:
        return self.pattern.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "operator": self.operator.value,
            "expected_value": self.expected_value,
            "resolved_value": self.resolved_value,
            "matched": self.matched,
            "exists": self.exists,
        }
