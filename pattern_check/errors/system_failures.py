"""
System failure errors for the reporting sink and the step lifecycle.

These represent failures outside pattern semantics that end the
invocation with the FAILED outcome.
"""

from typing import Optional

from .base import PatternCheckError


class SystemFailureError(PatternCheckError):
    """Base class for unrecoverable system failures."""


class ReportingError(SystemFailureError):
    """The reporting sink rejected or could not process a step update."""

    def __init__(self, message: str, reporter: Optional[str] = None,
                 step_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reporter = reporter
        self.step_id = step_id


class StateTransitionError(SystemFailureError):
    """Invalid step lifecycle transition."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition
