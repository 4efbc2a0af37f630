"""Configuration and pattern definition validation utilities."""

from dataclasses import dataclass, fields
from string import Formatter
from typing import Any, Mapping, Optional

from .defaults import TEMPLATE_FIELDS, MessageTemplates

STDOUT_FORMATS = ("json", "pretty")
KNOWN_OPERATORS = ("equals", "not_equals")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters and pattern definitions."""

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a merged configuration dictionary."""
        errors = []

        for flag in ("warn_unknown_operators", "strict_operators"):
            if flag in config and not isinstance(config[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=config[flag]
                ))

        errors.extend(ConfigValidator.validate_messages(config.get("messages") or {}))
        errors.extend(ConfigValidator.validate_reporting(config.get("reporting") or {}))

        return errors

    @staticmethod
    def validate_messages(messages: Any) -> list[ValidationError]:
        """Validate message template overrides."""
        if not isinstance(messages, dict):
            return [ValidationError(field="messages", message="Must be a mapping", value=messages)]

        errors = []
        known = {f.name for f in fields(MessageTemplates)}

        for name, template in messages.items():
            if name not in known:
                errors.append(ValidationError(
                    field=f"messages.{name}",
                    message="Unknown message template",
                    value=template
                ))
            elif not isinstance(template, str) or not template:
                errors.append(ValidationError(
                    field=f"messages.{name}",
                    message="Must be a non-empty string",
                    value=template
                ))
            elif name in TEMPLATE_FIELDS:
                problem = ConfigValidator.check_template(template, TEMPLATE_FIELDS[name])
                if problem:
                    errors.append(ValidationError(
                        field=f"messages.{name}",
                        message=problem,
                        value=template
                    ))

        return errors

    @staticmethod
    def check_template(template: str, allowed: tuple[str, ...]) -> Optional[str]:
        """
        Check that a message template formats with the given placeholders.

        Returns:
            Description of the problem, or None if the template is usable
        """
        try:
            names = [name for _, name, _, _ in Formatter().parse(template) if name is not None]
        except ValueError as e:
            return f"Invalid template: {e}"

        for name in names:
            if name not in allowed:
                return f"Unknown placeholder {{{name}}}, expected one of {', '.join(allowed)}"

        try:
            template.format(**{name: "x" for name in allowed})
        except (ValueError, KeyError, IndexError, AttributeError) as e:
            return f"Invalid template: {e}"

        return None

    @staticmethod
    def validate_reporting(reporting: Any) -> list[ValidationError]:
        """Validate reporter parameters."""
        if not isinstance(reporting, dict):
            return [ValidationError(field="reporting", message="Must be a mapping", value=reporting)]

        errors = []

        if "stdout_format" in reporting and reporting["stdout_format"] not in STDOUT_FORMATS:
            errors.append(ValidationError(
                field="reporting.stdout_format",
                message=f"Must be one of {', '.join(STDOUT_FORMATS)}",
                value=reporting["stdout_format"]
            ))

        if "include_timestamp" in reporting and not isinstance(reporting["include_timestamp"], bool):
            errors.append(ValidationError(
                field="reporting.include_timestamp",
                message="Must be a boolean",
                value=reporting["include_timestamp"]
            ))

        return errors

    @staticmethod
    def validate_patterns(patterns: Any, strict_operators: bool = False) -> list[ValidationError]:
        """
        Validate raw pattern definitions as found in a flow definition.

        Args:
            patterns: Sequence of pattern mappings with key, type and value
            strict_operators: Report operators other than equals/not_equals

        Returns:
            List of validation errors, empty when all patterns are usable
        """
        if patterns is None:
            return []
        if not isinstance(patterns, (list, tuple)):
            return [ValidationError(field="patterns", message="Must be a list", value=patterns)]

        errors = []

        for index, pattern in enumerate(patterns):
            prefix = f"patterns[{index}]"

            if not isinstance(pattern, Mapping):
                errors.append(ValidationError(field=prefix, message="Must be a mapping", value=pattern))
                continue

            key = pattern.get("key")
            if not isinstance(key, str):
                errors.append(ValidationError(
                    field=f"{prefix}.key",
                    message="Must be a string",
                    value=key
                ))

            operator = pattern.get("type")
            if not isinstance(operator, str):
                errors.append(ValidationError(
                    field=f"{prefix}.type",
                    message="Must be a string",
                    value=operator
                ))
            elif strict_operators and operator not in KNOWN_OPERATORS:
                errors.append(ValidationError(
                    field=f"{prefix}.type",
                    message=f"Must be one of {', '.join(KNOWN_OPERATORS)}",
                    value=operator
                ))

            value = pattern.get("value")
            if isinstance(value, (Mapping, list, tuple)):
                errors.append(ValidationError(
                    field=f"{prefix}.value",
                    message="Must be a scalar value",
                    value=value
                ))

        return errors
