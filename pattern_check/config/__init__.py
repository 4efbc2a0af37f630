"""
Configuration for pattern check.

Defaults live in dataclasses; a YAML file and per-call overrides are
merged on top of them by the loader.
"""

from .defaults import (
    MessageTemplates,
    PatternCheckConfig,
    ReportingParams,
    get_default_config,
)
from .loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "MessageTemplates",
    "PatternCheckConfig",
    "ReportingParams",
    "get_default_config",
]
