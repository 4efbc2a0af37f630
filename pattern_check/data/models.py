"""Data models exchanged with the flow runner."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..config.validation import ConfigValidator
from ..errors import ConfigurationError
from ..patterns.models import Pattern
from ..state.models import StepOutcome


@dataclass(frozen=True)
class ExecutionContext:
    """Execution the step belongs to."""
    id: str
    flow_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExecutionContext":
        if not isinstance(data, Mapping):
            raise ConfigurationError("Execution must be a mapping", context={"execution_type": type(data).__name__})
        execution_id = data.get("id")
        if not execution_id:
            raise ConfigurationError("Execution id is required", context={"execution": dict(data)})
        flow_id = data.get("flow_id")
        return cls(id=str(execution_id), flow_id=str(flow_id) if flow_id is not None else None)


@dataclass(frozen=True)
class StepIdentity:
    """Identity of the step being executed."""
    id: str
    action_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StepIdentity":
        if not isinstance(data, Mapping):
            raise ConfigurationError("Step must be a mapping", context={"step_type": type(data).__name__})
        step_id = data.get("id")
        if not step_id:
            raise ConfigurationError("Step id is required", context={"step": dict(data)})
        action_id = data.get("action_id")
        return cls(id=str(step_id), action_id=str(action_id) if action_id is not None else None)


@dataclass(frozen=True)
class FlowDefinition:
    """The part of a flow definition the pattern check reads."""
    id: str
    name: str = ""
    patterns: tuple[Pattern, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], strict_operators: bool = False) -> "FlowDefinition":
        """
        Build a flow definition from a mapping.

        Raises:
            ConfigurationError: If the pattern definitions are invalid
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Flow definition must be a mapping",
                                     context={"flow_type": type(data).__name__})

        raw_patterns = data.get("patterns") or []

        errors = ConfigValidator.validate_patterns(raw_patterns, strict_operators=strict_operators)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Invalid flow patterns: " + "; ".join(error_msgs),
                errors=errors,
                source=str(data.get("id", ""))
            )

        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            patterns=tuple(Pattern.from_dict(p) for p in raw_patterns),
        )


@dataclass(frozen=True)
class ActionResult:
    """Result handed back to the flow runner.

    Pattern checks never produce data, so ``data`` is always None.
    """
    outcome: StepOutcome
    data: Optional[dict[str, Any]] = None

    @property
    def finished(self) -> bool:
        return self.outcome == StepOutcome.CONTINUE

    @property
    def canceled(self) -> bool:
        return self.outcome == StepOutcome.CANCELED

    @property
    def no_pattern_match(self) -> bool:
        return self.outcome == StepOutcome.NO_PATTERN_MATCH

    @property
    def failed(self) -> bool:
        return self.outcome == StepOutcome.FAILED

    def as_tuple(self) -> tuple[Optional[dict[str, Any]], bool, bool, bool, bool]:
        """(data, finished, canceled, no_pattern_match, failed)"""
        return self.data, self.finished, self.canceled, self.no_pattern_match, self.failed


ExecutionLike = Union[ExecutionContext, Mapping[str, Any]]
FlowLike = Union[FlowDefinition, Mapping[str, Any]]
StepLike = Union[StepIdentity, Mapping[str, Any]]
