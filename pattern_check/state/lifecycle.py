"""
Step lifecycle state machine.

One StepLifecycle is created per invocation. It enforces that RUNNING is
entered before any outcome and that exactly one terminal state is reached.
"""

from typing import Any, Optional

from ..errors import StateTransitionError
from ..logging.config import get_state_logger, log_step_transition
from .models import StepOutcome, StepState

state_logger = get_state_logger(__name__)

ALLOWED_TRANSITIONS: dict[StepState, frozenset[StepState]] = {
    StepState.PENDING: frozenset({StepState.RUNNING}),
    StepState.RUNNING: frozenset({
        StepState.CONTINUE,
        StepState.CANCELED,
        StepState.NO_PATTERN_MATCH,
        StepState.FAILED,
    }),
    StepState.CONTINUE: frozenset(),
    StepState.CANCELED: frozenset(),
    StepState.NO_PATTERN_MATCH: frozenset(),
    StepState.FAILED: frozenset(),
}


class StepLifecycle:
    """Tracks the lifecycle of a single step execution."""

    def __init__(self, step_id: str, state: StepState = StepState.PENDING):
        self.step_id = step_id
        self.state = state
        self.history: list[StepState] = [state]
        self.logger = state_logger

    @property
    def is_finished(self) -> bool:
        return self.state.is_terminal

    @property
    def outcome(self) -> Optional[StepOutcome]:
        return self.state.to_outcome() if self.state.is_terminal else None

    def transition(
        self,
        new_state: StepState,
        trigger: str,
        context: Optional[dict[str, Any]] = None
    ) -> StepState:
        """
        Move to a new state.

        Raises:
            StateTransitionError: If the transition is not allowed
        """
        if new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise StateTransitionError(
                f"Invalid step transition from {self.state.value} to {new_state.value}",
                current_state=self.state.value,
                attempted_transition=new_state.value,
                context={"step_id": self.step_id, "trigger": trigger}
            )

        log_step_transition(
            self.logger,
            step_id=self.step_id,
            from_state=self.state.value,
            to_state=new_state.value,
            trigger=trigger,
            context=context
        )

        self.state = new_state
        self.history.append(new_state)
        return new_state

    def start(self) -> StepState:
        return self.transition(StepState.RUNNING, trigger="invoked")

    def finish(self, outcome: StepOutcome, trigger: str,
               context: Optional[dict[str, Any]] = None) -> StepOutcome:
        self.transition(StepState.for_outcome(outcome), trigger=trigger, context=context)
        return outcome
