"""
Centralized logging configuration for pattern check.

This module provides standardized logging configuration using structlog
for all components. Pattern results and step lifecycle transitions are
logged through the helpers below so their fields stay consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Log to stderr so reporters writing to stdout stay parseable
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    The logger stays lazy until first use, so module-level loggers pick up
    configure_logging() even when it runs after import.

    Args:
        name: Logger name (typically __name__)
        **initial_values: Context bound to every entry

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name, **initial_values)


def get_evaluation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for per-pattern evaluation results.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the pattern check subsystem
    """
    return get_logger(name, subsystem="pattern_check", audit_trail=True)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for step lifecycle transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the step lifecycle subsystem
    """
    return get_logger(name, subsystem="step_lifecycle", audit_trail=True)


def log_pattern_result(
    logger: FilteringBoundLogger,
    key: str,
    operator: str,
    expected_value: str,
    resolved_value: str,
    matched: bool,
    step_id: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single pattern with standardized fields.

    Args:
        logger: Structlog logger instance
        key: Path expression of the pattern
        operator: Operator value (equals, not_equals, unknown)
        expected_value: Value the pattern compares against
        resolved_value: String form of the resolved payload field
        matched: Whether the pattern matched
        step_id: Step the evaluation belongs to
        context: Additional context data
    """
    bound_logger = logger.bind(
        pattern_key=key,
        operator=operator,
        expected_value=expected_value,
        resolved_value=resolved_value,
        pattern_result="MATCH" if matched else "MISMATCH",
        step_id=step_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if matched:
        bound_logger.info("Pattern matched")
    else:
        bound_logger.warning("Pattern did not match")


def log_step_transition(
    logger: FilteringBoundLogger,
    step_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a step lifecycle transition with standardized format.

    Args:
        logger: Structlog logger instance
        step_id: ID of the step transitioning
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        step_id=step_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Step transition")
