#!/usr/bin/env python3
"""Configuration validation script."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pattern_check.config.loader import ConfigLoader
from pattern_check.config.validation import ConfigValidator, ValidationError
from pattern_check.errors import ConfigurationError


def validate_flow_patterns(flow_path: Path, strict_operators: bool) -> List[ValidationError]:
    """Validate the pattern definitions of a flow file."""
    with open(flow_path) as f:
        flow = yaml.safe_load(f) or {}
    if not isinstance(flow, dict):
        return [ValidationError(field="flow", message="Must be a mapping", value=type(flow).__name__)]
    return ConfigValidator.validate_patterns(flow.get("patterns"), strict_operators=strict_operators)


def main(argv: Optional[List[str]] = None) -> int:
    """Main validation function."""
    parser = argparse.ArgumentParser(description="Validate pattern check configuration")
    parser.add_argument("--config-dir", type=Path, default=None)
    parser.add_argument("--flow", type=Path, default=None, help="Flow file whose patterns to validate")
    args = parser.parse_args(argv)

    print("🔍 Validating pattern check configuration...")
    loader = ConfigLoader.create(args.config_dir)
    all_valid = True

    try:
        config = loader.load()
        print(f"✅ {loader.config_file} is valid")
    except ConfigurationError as e:
        print(f"❌ {e}")
        for error in e.errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    if args.flow:
        print(f"\n📋 Validating patterns in {args.flow}...")
        try:
            errors = validate_flow_patterns(args.flow, config.strict_operators)
        except (OSError, yaml.YAMLError) as e:
            print(f"❌ Error reading {args.flow}: {e}")
            return 1

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Flow patterns are valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        return 0

    print("\n❌ Configuration validation failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
