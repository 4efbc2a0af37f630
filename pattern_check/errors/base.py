"""Base exception types shared by every pattern check error."""

from typing import Any, Optional


class PatternCheckError(Exception):
    """Base class for all pattern check errors."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(PatternCheckError):
    """Invalid configuration file or flow pattern definition."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
