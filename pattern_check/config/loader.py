"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import ConfigurationError
from .defaults import (
    MessageTemplates,
    PatternCheckConfig,
    ReportingParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "pattern_check.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: PatternCheckConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file, if present."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_file}: {e}",
                source=str(self.config_file)
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                source=str(self.config_file)
            )

        if "pattern_check" in file_config:
            return file_config["pattern_check"] or {}
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. YAML configuration file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> PatternCheckConfig:
        """Load, validate and build the effective configuration."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Configuration validation failed: " + "; ".join(error_msgs),
                errors=errors,
                source=str(self.config_file)
            )

        return build_config(config)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if is_dataclass(obj):
            result = {}
            for f in fields(obj):
                value = getattr(obj, f.name)
                if is_dataclass(value):
                    result[f.name] = self._dataclass_to_dict(value)
                else:
                    result[f.name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> PatternCheckConfig:
    """Build a PatternCheckConfig from a merged configuration dictionary.

    Unknown keys are ignored.
    """
    defaults = get_default_config()

    messages = _build_section(MessageTemplates, config.get("messages") or {})
    reporting = _build_section(ReportingParams, config.get("reporting") or {})

    return PatternCheckConfig(
        warn_unknown_operators=config.get("warn_unknown_operators", defaults.warn_unknown_operators),
        strict_operators=config.get("strict_operators", defaults.strict_operators),
        messages=messages,
        reporting=reporting,
    )


def _build_section(cls: type, values: dict[str, Any]) -> Any:
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in values.items() if k in known})
