"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict

from pattern_check.data.models import ExecutionContext, FlowDefinition, StepIdentity
from pattern_check.engine import PatternCheckEngine
from pattern_check.patterns.models import Pattern
from pattern_check.reporting.memory_reporter import InMemoryStepReporter


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """Sample alert payload for testing."""
    return {
        "alert": {
            "status": "firing",
            "labels": {"severity": "critical", "service": "checkout"},
            "value": 97.5,
        },
        "receivers": ["oncall", "slack"],
        "retries": 2,
        "acknowledged": False,
        "silenced_by": None,
    }


@pytest.fixture
def execution() -> ExecutionContext:
    """Execution context for testing."""
    return ExecutionContext(id="exec-001", flow_id="flow-001")


@pytest.fixture
def step() -> StepIdentity:
    """Step identity for testing."""
    return StepIdentity(id="step-001", action_id="action-001")


@pytest.fixture
def reporter() -> InMemoryStepReporter:
    """In-memory reporter capturing every step update."""
    return InMemoryStepReporter()


@pytest.fixture
def engine(reporter: InMemoryStepReporter) -> PatternCheckEngine:
    """Engine wired to the in-memory reporter."""
    return PatternCheckEngine(reporter)


@pytest.fixture
def make_flow():
    """Factory building a flow definition from (key, type, value) triples."""
    def _make_flow(*patterns: tuple) -> FlowDefinition:
        return FlowDefinition(
            id="flow-001",
            name="test flow",
            patterns=tuple(Pattern(key=k, type=t, value=v) for k, t, v in patterns),
        )
    return _make_flow

