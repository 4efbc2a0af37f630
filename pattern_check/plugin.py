"""
Plugin metadata and action entry point.

The flow runner discovers the action through ``Plugin`` and calls
``execute`` once per pattern check step.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from .config.defaults import PatternCheckConfig
from .data.models import ActionResult, ExecutionLike, FlowLike, StepLike
from .engine import PatternCheckEngine
from .reporting.base import BaseStepReporter


@dataclass(frozen=True)
class PluginInfo:
    """Registration info of a flow runner plugin."""
    name: str
    type: str
    version: str
    creator: str


@dataclass(frozen=True)
class ActionDetails:
    """How the action is presented in the flow editor."""
    name: str
    description: str
    icon: str
    type: str
    category: str
    is_hidden: bool = False
    params: Optional[list[dict[str, Any]]] = None


PLUGIN_INFO = PluginInfo(
    name="Pattern Check",
    type="action",
    version="1.0.5",
    creator="JustNZ",
)

ACTION_DETAILS = ActionDetails(
    name="Pattern Check",
    description="Check flow patterns",
    icon="solar:list-check-minimalistic-bold",
    type="pattern_check",
    category="Utility",
    is_hidden=True,
    params=None,
)


class PatternCheckPlugin:
    """Pattern check action as registered with the flow runner."""

    def __init__(self, reporter: BaseStepReporter, config: Optional[PatternCheckConfig] = None):
        self.engine = PatternCheckEngine(reporter, config=config)

    def init(self) -> PluginInfo:
        return PLUGIN_INFO

    def details(self) -> ActionDetails:
        return ACTION_DETAILS

    def describe(self) -> dict[str, Any]:
        """Plugin info and action details as plain data."""
        return {"plugin": asdict(PLUGIN_INFO), "action": asdict(ACTION_DETAILS)}

    def execute(self, execution: ExecutionLike, flow: FlowLike, payload: Any,
                step: StepLike) -> ActionResult:
        return self.engine.execute(execution, flow, payload, step)
