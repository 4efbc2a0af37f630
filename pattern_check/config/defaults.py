"""Default configuration parameters for pattern evaluation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MessageTemplates:
    """Human-readable step messages.

    Per-pattern templates are formatted with ``key``, ``value`` and ``type``.
    """
    checking: str = "Checking for patterns"
    no_patterns: str = "No patterns are defined. Continue to next step"

    # Per-pattern results
    equals_matched: str = "Pattern: {key} == {value} matched. Continue to next step"
    equals_mismatched: str = "Pattern: {key} == {value} not found."
    not_equals_matched: str = "Pattern: {key} != {value} not found. Continue to next step"
    not_equals_mismatched: str = "Pattern: {key} != {value} matched."
    unknown_operator: str = "Pattern: {key} has unsupported type {type}. Skipped"

    # Terminal results
    all_matched: str = "All patterns matched. Continue to next step"
    some_mismatched: str = "Some patterns did not match. Cancel execution"
    serialization_failed: str = "Failed to serialize payload: {error}"
    evaluation_failed: str = "Pattern evaluation failed: {error}"


# Placeholders each formatted template may use; other templates are sent verbatim
PATTERN_FIELDS = ("key", "value", "type")
FAILURE_FIELDS = ("error",)
TEMPLATE_FIELDS = {
    "equals_matched": PATTERN_FIELDS,
    "equals_mismatched": PATTERN_FIELDS,
    "not_equals_matched": PATTERN_FIELDS,
    "not_equals_mismatched": PATTERN_FIELDS,
    "unknown_operator": PATTERN_FIELDS,
    "serialization_failed": FAILURE_FIELDS,
    "evaluation_failed": FAILURE_FIELDS,
}


@dataclass(frozen=True)
class ReportingParams:
    """Parameters for the bundled reporters."""
    stdout_format: str = "json"        # json, pretty
    include_timestamp: bool = True     # Add reported_at to stdout output


@dataclass(frozen=True)
class PatternCheckConfig:
    """Complete pattern check configuration."""
    warn_unknown_operators: bool = True    # Log unknown operators as warnings
    strict_operators: bool = False         # Raise on unknown operators instead of matching
    messages: MessageTemplates = field(default_factory=MessageTemplates)
    reporting: ReportingParams = field(default_factory=ReportingParams)


def get_default_config() -> PatternCheckConfig:
    """Get the default configuration instance."""
    return PatternCheckConfig(
        warn_unknown_operators=True,
        strict_operators=False,
        messages=MessageTemplates(),
        reporting=ReportingParams(),
    )
