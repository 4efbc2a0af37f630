"""
Step state data models.

This module defines the terminal outcomes of a pattern check, the step
lifecycle states and the patch structure sent to the reporting interface.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ..utils.time import format_timestamp


class StepOutcome(str, Enum):
    """Terminal classification of one evaluation run."""
    CONTINUE = "continue"
    CANCELED = "canceled"
    NO_PATTERN_MATCH = "no_pattern_match"
    FAILED = "failed"


class StepState(str, Enum):
    """Step lifecycle states."""
    PENDING = "pending"
    RUNNING = "running"
    CONTINUE = "continue"
    CANCELED = "canceled"
    NO_PATTERN_MATCH = "no_pattern_match"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self not in (StepState.PENDING, StepState.RUNNING)

    @classmethod
    def for_outcome(cls, outcome: StepOutcome) -> "StepState":
        return cls(outcome.value)

    def to_outcome(self) -> StepOutcome:
        if not self.is_terminal:
            raise ValueError(f"State {self.value} has no outcome")
        return StepOutcome(self.value)


@dataclass
class StepUpdate:
    """Patch for a step record held by the host.

    Flags left as None are not part of the patch.
    """
    step_id: str
    messages: list[str] = field(default_factory=list)
    action_id: Optional[str] = None

    # Status flags
    pending: Optional[bool] = None
    running: Optional[bool] = None
    canceled: Optional[bool] = None
    finished: Optional[bool] = None
    no_pattern_match: Optional[bool] = None
    error: Optional[bool] = None

    # Timestamps
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the patch, omitting unset fields."""
        data: dict[str, Any] = {"step_id": self.step_id, "messages": list(self.messages)}

        if self.action_id is not None:
            data["action_id"] = self.action_id

        for flag in ("pending", "running", "canceled", "finished", "no_pattern_match", "error"):
            value = getattr(self, flag)
            if value is not None:
                data[flag] = value

        if self.started_at is not None:
            data["started_at"] = format_timestamp(self.started_at)
        if self.finished_at is not None:
            data["finished_at"] = format_timestamp(self.finished_at)

        return data
