"""Tests for step state data models."""

import pytest
from datetime import datetime, timezone

from pattern_check.state.models import StepOutcome, StepState, StepUpdate


class TestStepState:
    """Test step lifecycle states."""

    def test_terminal_states(self) -> None:
        assert not StepState.PENDING.is_terminal
        assert not StepState.RUNNING.is_terminal
        for state in (StepState.CONTINUE, StepState.CANCELED, StepState.NO_PATTERN_MATCH, StepState.FAILED):
            assert state.is_terminal

    def test_outcome_mapping_is_one_to_one(self) -> None:
        for outcome in StepOutcome:
            assert StepState.for_outcome(outcome).to_outcome() == outcome

    def test_non_terminal_state_has_no_outcome(self) -> None:
        with pytest.raises(ValueError):
            StepState.RUNNING.to_outcome()

    def test_string_values(self) -> None:
        assert StepOutcome.NO_PATTERN_MATCH == "no_pattern_match"
        assert StepState.RUNNING.value == "running"


class TestStepUpdate:
    """Test the step update patch."""

    def test_unset_fields_omitted(self) -> None:
        update = StepUpdate(step_id="step-1", messages=["hello"])
        assert update.to_dict() == {"step_id": "step-1", "messages": ["hello"]}

    def test_false_flags_are_kept(self) -> None:
        update = StepUpdate(step_id="step-1", running=False, canceled=False)
        data = update.to_dict()
        assert data["running"] is False
        assert data["canceled"] is False
        assert "finished" not in data

    def test_timestamps_serialized_as_utc_iso(self) -> None:
        started = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        update = StepUpdate(step_id="step-1", action_id="a-1", started_at=started, finished_at=started)
        data = update.to_dict()

        assert data["action_id"] == "a-1"
        assert data["started_at"] == "2024-05-01T12:00:00+00:00"
        assert data["finished_at"] == "2024-05-01T12:00:00+00:00"

    def test_messages_copied(self) -> None:
        update = StepUpdate(step_id="step-1", messages=["a"])
        data = update.to_dict()
        data["messages"].append("b")
        assert update.messages == ["a"]
