#!/usr/bin/env python3
"""
Basic Usage Example - Pattern Check

This script demonstrates running the pattern check action the way a flow
runner would. It shows how to:
- Create an engine with an in-memory reporter
- Execute a step for a matching and a non-matching payload
- Inspect the reported step messages and the outcome

Run: python examples/basic_usage.py
"""

import json
from typing import Any, Dict

from pattern_check.data.models import ExecutionContext, StepIdentity
from pattern_check.engine import PatternCheckEngine
from pattern_check.logging import configure_logging
from pattern_check.reporting import InMemoryStepReporter


def create_flow() -> Dict[str, Any]:
    """Create a sample flow definition with two patterns."""
    return {
        "id": "flow-001",
        "name": "Escalate firing alerts",
        "patterns": [
            {"key": "alert.status", "type": "equals", "value": "firing"},
            {"key": "alert.labels.severity", "type": "not_equals", "value": "info"},
        ],
    }


def run_step(engine: PatternCheckEngine, reporter: InMemoryStepReporter,
             step_id: str, payload: Dict[str, Any]) -> None:
    """Execute one step and print what was reported."""
    result = engine.execute(
        ExecutionContext(id="exec-001", flow_id="flow-001"),
        create_flow(),
        payload,
        StepIdentity(id=step_id, action_id="pattern_check"),
    )

    print(f"\n📋 Step {step_id} -> {result.outcome.value}")
    for message in reporter.messages_for(step_id):
        print(f"  • {message}")
    print(json.dumps(reporter.step_record(step_id), indent=2))


def main() -> None:
    configure_logging(level="WARNING")

    reporter = InMemoryStepReporter()
    engine = PatternCheckEngine(reporter)

    run_step(engine, reporter, "step-firing", {
        "alert": {"status": "firing", "labels": {"severity": "critical"}},
    })
    run_step(engine, reporter, "step-resolved", {
        "alert": {"status": "resolved", "labels": {"severity": "info"}},
    })


if __name__ == "__main__":
    main()
