"""In-memory step reporter keeping the full update history per step."""

import threading
from collections import defaultdict
from typing import Optional

from ..state.models import StepUpdate
from .base import BaseStepReporter


class InMemoryStepReporter(BaseStepReporter):
    """Records every update in order. Safe to share between threads."""

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self._lock = threading.Lock()
        self._updates: dict[str, list[StepUpdate]] = defaultdict(list)
        self._executions: dict[str, str] = {}

    def send_update(self, execution_id: str, update: StepUpdate) -> None:
        with self._lock:
            self._updates[update.step_id].append(update)
            self._executions[update.step_id] = execution_id

    def updates_for(self, step_id: str) -> list[StepUpdate]:
        with self._lock:
            return list(self._updates.get(step_id, []))

    def messages_for(self, step_id: str) -> list[str]:
        """All messages appended to a step, in report order."""
        return [message for update in self.updates_for(step_id) for message in update.messages]

    def execution_for(self, step_id: str) -> Optional[str]:
        with self._lock:
            return self._executions.get(step_id)

    def step_record(self, step_id: str) -> dict:
        """
        Current state of a step after applying all patches in order.

        Messages are appended; every other field takes its latest value.
        """
        record: dict = {"step_id": step_id, "messages": []}
        for update in self.updates_for(step_id):
            patch = update.to_dict()
            record["messages"].extend(patch.pop("messages"))
            record.update(patch)
        return record

    def clear(self) -> None:
        with self._lock:
            self._updates.clear()
            self._executions.clear()
