"""Step update reporting: the interface the host implements and bundled reporters"""

from .base import BaseStepReporter
from .callback_reporter import CallbackStepReporter
from .memory_reporter import InMemoryStepReporter
from .stdout_reporter import StdoutStepReporter

__all__ = [
    "BaseStepReporter",
    "CallbackStepReporter",
    "InMemoryStepReporter",
    "StdoutStepReporter",
]
