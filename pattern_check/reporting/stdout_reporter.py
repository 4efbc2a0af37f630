"""Standard output step reporter."""

import json
import sys
from typing import Optional, TextIO

from ..config.defaults import ReportingParams
from ..state.models import StepUpdate
from ..utils.time import format_timestamp, utc_now
from .base import BaseStepReporter


class StdoutStepReporter(BaseStepReporter):
    """Writes each update to a stream as JSON or as one readable line."""

    def __init__(
        self,
        params: Optional[ReportingParams] = None,
        stream: Optional[TextIO] = None,
        name: str = "stdout"
    ):
        super().__init__(name)
        self.params = params or ReportingParams()
        self.stream = stream

    def send_update(self, execution_id: str, update: StepUpdate) -> None:
        stream = self.stream or sys.stdout
        print(self._format_update(execution_id, update), file=stream, flush=True)

    def _format_update(self, execution_id: str, update: StepUpdate) -> str:
        """Format an update for output."""
        if self.params.stdout_format == "pretty":
            flags = [
                flag for flag in ("running", "canceled", "finished", "no_pattern_match", "error")
                if getattr(update, flag)
            ]
            output = f"[{format_timestamp(utc_now())}] STEP {update.step_id}: " + " | ".join(update.messages)
            if flags:
                output += f" ({', '.join(flags)})"
            return output

        data = update.to_dict()
        data["execution_id"] = execution_id
        if self.params.include_timestamp:
            data["reported_at"] = format_timestamp(utc_now())
        return json.dumps(data, ensure_ascii=False)
