"""Reporter adapting a host-provided callable."""

from typing import Callable

from ..state.models import StepUpdate
from .base import BaseStepReporter

UpdateCallback = Callable[[str, StepUpdate], None]


class CallbackStepReporter(BaseStepReporter):
    """Forwards updates to a callable taking (execution_id, update).

    The callable must finish applying the update before it returns.
    """

    def __init__(self, callback: UpdateCallback, name: str = "callback"):
        super().__init__(name)
        self.callback = callback

    def send_update(self, execution_id: str, update: StepUpdate) -> None:
        self.callback(execution_id, update)
