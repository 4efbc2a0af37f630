"""Tests for step update reporters."""

import io
import json
import threading

import pytest
from unittest.mock import Mock

from pattern_check.config.defaults import ReportingParams
from pattern_check.errors import ReportingError
from pattern_check.reporting.base import BaseStepReporter
from pattern_check.reporting.callback_reporter import CallbackStepReporter
from pattern_check.reporting.memory_reporter import InMemoryStepReporter
from pattern_check.reporting.stdout_reporter import StdoutStepReporter
from pattern_check.state.models import StepUpdate


class FailingReporter(BaseStepReporter):
    """Reporter whose destination always rejects updates."""

    def __init__(self, error: Exception):
        super().__init__("failing")
        self.error = error

    def send_update(self, execution_id, update):
        raise self.error


class TestBaseStepReporter:
    """Test suite for the reporter base class."""

    def test_failure_wrapped_in_reporting_error(self) -> None:
        reporter = FailingReporter(ConnectionError("sink unreachable"))

        with pytest.raises(ReportingError) as exc_info:
            reporter.report("exec-1", StepUpdate(step_id="step-1"))

        error = exc_info.value
        assert error.reporter == "failing"
        assert error.step_id == "step-1"
        assert error.context == {"execution_id": "exec-1"}
        assert isinstance(error.__cause__, ConnectionError)

    def test_reporting_error_passed_through(self) -> None:
        original = ReportingError("rejected", reporter="remote")
        reporter = FailingReporter(original)

        with pytest.raises(ReportingError) as exc_info:
            reporter.report("exec-1", StepUpdate(step_id="step-1"))

        assert exc_info.value is original

    def test_stats(self) -> None:
        reporter = InMemoryStepReporter()
        reporter.report("exec-1", StepUpdate(step_id="step-1"))
        reporter.report("exec-1", StepUpdate(step_id="step-1"))

        stats = reporter.get_stats()
        assert stats["report_count"] == 2
        assert stats["error_count"] == 0
        assert stats["success_rate"] == 1.0

        reporter.reset_stats()
        assert reporter.get_stats()["report_count"] == 0
        assert reporter.get_stats()["success_rate"] == 0.0

    def test_error_stats(self) -> None:
        reporter = FailingReporter(RuntimeError("boom"))
        with pytest.raises(ReportingError):
            reporter.report("exec-1", StepUpdate(step_id="step-1"))
        assert reporter.get_stats()["error_count"] == 1


class TestInMemoryStepReporter:
    """Test suite for the in-memory reporter."""

    def test_preserves_order_per_step(self) -> None:
        reporter = InMemoryStepReporter()
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["one"]))
        reporter.report("exec-1", StepUpdate(step_id="b", messages=["other"]))
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["two", "three"]))

        assert reporter.messages_for("a") == ["one", "two", "three"]
        assert reporter.messages_for("b") == ["other"]
        assert reporter.messages_for("unknown") == []
        assert reporter.execution_for("a") == "exec-1"

    def test_step_record_applies_patches(self) -> None:
        reporter = InMemoryStepReporter()
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["start"], running=True, pending=False))
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["mismatch"], canceled=True))
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["end"], running=False,
                                             canceled=False, finished=True))

        record = reporter.step_record("a")
        assert record["messages"] == ["start", "mismatch", "end"]
        assert record["running"] is False
        assert record["pending"] is False
        assert record["canceled"] is False
        assert record["finished"] is True

    def test_clear(self) -> None:
        reporter = InMemoryStepReporter()
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["x"]))
        reporter.clear()
        assert reporter.updates_for("a") == []

    def test_concurrent_reports(self) -> None:
        reporter = InMemoryStepReporter()

        def report_many(step_id: str) -> None:
            for i in range(200):
                reporter.report("exec-1", StepUpdate(step_id=step_id, messages=[str(i)]))

        threads = [threading.Thread(target=report_many, args=(f"step-{n}",)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for n in range(4):
            assert reporter.messages_for(f"step-{n}") == [str(i) for i in range(200)]
        assert reporter.get_stats()["report_count"] == 800


class TestCallbackStepReporter:
    """Test suite for the callback reporter."""

    def test_forwards_updates(self) -> None:
        callback = Mock()
        reporter = CallbackStepReporter(callback)
        update = StepUpdate(step_id="a", messages=["x"])

        reporter.report("exec-1", update)

        callback.assert_called_once_with("exec-1", update)

    def test_callback_failure_becomes_reporting_error(self) -> None:
        reporter = CallbackStepReporter(Mock(side_effect=IOError("disk full")), name="host")

        with pytest.raises(ReportingError) as exc_info:
            reporter.report("exec-1", StepUpdate(step_id="a"))

        assert exc_info.value.reporter == "host"


class TestStdoutStepReporter:
    """Test suite for the stdout reporter."""

    def test_json_format(self) -> None:
        stream = io.StringIO()
        reporter = StdoutStepReporter(ReportingParams(stdout_format="json", include_timestamp=False), stream=stream)

        reporter.report("exec-1", StepUpdate(step_id="a", messages=["hello"], finished=True))

        line = json.loads(stream.getvalue())
        assert line == {"step_id": "a", "messages": ["hello"], "finished": True, "execution_id": "exec-1"}

    def test_json_format_with_timestamp(self) -> None:
        stream = io.StringIO()
        reporter = StdoutStepReporter(ReportingParams(), stream=stream)

        reporter.report("exec-1", StepUpdate(step_id="a"))

        assert "reported_at" in json.loads(stream.getvalue())

    def test_pretty_format(self) -> None:
        stream = io.StringIO()
        reporter = StdoutStepReporter(ReportingParams(stdout_format="pretty"), stream=stream)

        reporter.report("exec-1", StepUpdate(step_id="a", messages=["Some patterns did not match"],
                                             running=False, no_pattern_match=True, finished=True))

        output = stream.getvalue().strip()
        assert "STEP a: Some patterns did not match" in output
        assert output.endswith("(finished, no_pattern_match)")

    def test_one_line_per_update(self) -> None:
        stream = io.StringIO()
        reporter = StdoutStepReporter(stream=stream)

        reporter.report("exec-1", StepUpdate(step_id="a", messages=["one"]))
        reporter.report("exec-1", StepUpdate(step_id="a", messages=["two"]))

        assert len(stream.getvalue().splitlines()) == 2
