#!/usr/bin/env python3
"""Run one pattern check against a payload file.

Usage:
    python scripts/check_patterns.py --payload payload.json --flow flow.yaml

The flow file is YAML (or JSON) with a ``patterns`` list. Step updates are
printed to stdout, logs go to stderr. Exit status: 0 continue, 1 no pattern
match, 2 failed.
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pattern_check.config.loader import ConfigLoader
from pattern_check.data.models import ExecutionContext, StepIdentity
from pattern_check.engine import PatternCheckEngine
from pattern_check.errors import ConfigurationError
from pattern_check.logging import configure_logging
from pattern_check.reporting import StdoutStepReporter
from pattern_check.state.models import StepOutcome

EXIT_CODES = {
    StepOutcome.CONTINUE: 0,
    StepOutcome.NO_PATTERN_MATCH: 1,
    StepOutcome.CANCELED: 1,
    StepOutcome.FAILED: 2,
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check flow patterns against a payload")
    parser.add_argument("--payload", required=True, type=Path, help="JSON payload file")
    parser.add_argument("--flow", required=True, type=Path, help="YAML or JSON flow file with patterns")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory containing pattern_check.yaml")
    parser.add_argument("--execution-id", default="local", help="Execution id used in step updates")
    parser.add_argument("--step-id", default="pattern-check", help="Step id used in step updates")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser.parse_args(argv)


def _flow_id(flow):
    if isinstance(flow, dict) and flow.get("id") is not None:
        return str(flow["id"])
    return None


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    try:
        config = ConfigLoader.create(args.config_dir).load()
        with open(args.flow) as f:
            flow = yaml.safe_load(f) or {}
        with open(args.payload) as f:
            payload = json.load(f)
    except (OSError, ValueError, yaml.YAMLError, ConfigurationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_CODES[StepOutcome.FAILED]

    engine = PatternCheckEngine(StdoutStepReporter(config.reporting), config=config)
    result = engine.execute(
        ExecutionContext(id=args.execution_id, flow_id=_flow_id(flow)),
        flow,
        payload,
        StepIdentity(id=args.step_id),
    )

    return EXIT_CODES[result.outcome]


if __name__ == "__main__":
    sys.exit(main())
