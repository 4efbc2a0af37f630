"""
Errors raised while evaluating patterns against a payload.

These abort the whole evaluation; no partial results are returned.
"""

from typing import Optional

from .base import PatternCheckError


class EvaluationError(PatternCheckError):
    """Base class for errors that stop a pattern evaluation."""


class SerializationError(EvaluationError):
    """Payload cannot be turned into its canonical JSON form."""

    def __init__(self, message: str, payload_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class UnsupportedOperatorError(EvaluationError):
    """Pattern uses an operator the evaluator does not know.

    Only raised when strict operator checking is enabled.
    """

    def __init__(self, message: str, operator: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operator = operator
        self.key = key
