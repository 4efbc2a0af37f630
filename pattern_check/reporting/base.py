"""Base class for step update reporters."""

import threading
from abc import ABC, abstractmethod
from typing import Any

import structlog

from ..errors import ReportingError
from ..state.models import StepUpdate


class BaseStepReporter(ABC):
    """
    Sink for step updates.

    Implementations must apply updates in the order they are received. A
    failed update is fatal to the invocation that sent it.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"pattern_check.reporting.{name}")
        self._stats_lock = threading.Lock()
        self._report_count = 0
        self._error_count = 0

    @abstractmethod
    def send_update(self, execution_id: str, update: StepUpdate) -> None:
        """
        Send one update to the destination.

        Args:
            execution_id: Execution the step belongs to
            update: Patch to apply to the step record
        """
        pass

    def report(self, execution_id: str, update: StepUpdate) -> None:
        """
        Send an update, converting any failure into a ReportingError.

        Raises:
            ReportingError: If the destination rejected the update
        """
        try:
            self.send_update(execution_id, update)
        except ReportingError:
            self._record(error=True)
            raise
        except Exception as e:
            self._record(error=True)
            self.logger.error(
                "Failed to report step update",
                reporter=self.name,
                execution_id=execution_id,
                step_id=update.step_id,
                error=str(e)
            )
            raise ReportingError(
                f"Reporter {self.name} failed to process update: {e}",
                reporter=self.name,
                step_id=update.step_id,
                context={"execution_id": execution_id}
            ) from e

        self._record(error=False)

    def _record(self, error: bool) -> None:
        with self._stats_lock:
            if error:
                self._error_count += 1
            else:
                self._report_count += 1

    def get_stats(self) -> dict[str, Any]:
        """Get reporting statistics."""
        with self._stats_lock:
            report_count = self._report_count
            error_count = self._error_count

        return {
            "name": self.name,
            "report_count": report_count,
            "error_count": error_count,
            "success_rate": (
                report_count / (report_count + error_count)
                if (report_count + error_count) > 0 else 0.0
            )
        }

    def reset_stats(self) -> None:
        """Reset reporting statistics."""
        with self._stats_lock:
            self._report_count = 0
            self._error_count = 0
