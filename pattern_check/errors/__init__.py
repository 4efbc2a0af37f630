"""
Error classification for pattern evaluation and step reporting.

Every fatal error raised during an invocation maps to the FAILED step
outcome; the engine never retries on its own.
"""

from .base import PatternCheckError, ConfigurationError
from .evaluation import (
    EvaluationError,
    SerializationError,
    UnsupportedOperatorError,
)
from .system_failures import (
    SystemFailureError,
    ReportingError,
    StateTransitionError,
)

__all__ = [
    "PatternCheckError",
    "ConfigurationError",
    # Evaluation Errors
    "EvaluationError",
    "SerializationError",
    "UnsupportedOperatorError",
    # System Failures
    "SystemFailureError",
    "ReportingError",
    "StateTransitionError",
]
