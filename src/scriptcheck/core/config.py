# src/scriptcheck/core/config.py
"""Run configuration for property suites.

Uses Pydantic for validation with a frozen (immutable) model. The
configuration is created once before a suite runs and threaded explicitly
into every property; nothing reads it from global state.

Precedence (highest to lowest):
1. overrides - Direct overrides (CLI flags, per-property options)
2. config_file - YAML configuration file
3. defaults - Built-in Pydantic defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

# Optional top-level key grouping harness settings in a shared YAML file
CONFIG_SECTION = "scriptcheck"


class RunConfiguration(BaseModel):
    """Case count and size knobs for one suite run."""

    model_config = {"frozen": True, "extra": "forbid"}

    max_size: int = Field(
        default=20,
        gt=0,
        description="Upper bound on the size parameter handed to generators",
    )
    test_count: int = Field(
        default=100,
        gt=0,
        description="Number of cases sampled per property",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for case generation; a fresh seed is drawn and reported when unset",
    )
    max_shrink_steps: int = Field(
        default=1000,
        gt=0,
        description="Ceiling on successful shrink steps before giving up on minimization",
    )
    max_shrink_candidates: int = Field(
        default=10_000,
        gt=0,
        description="Ceiling on shrink candidates tried from one value before giving up on minimization",
    )

    def with_overrides(self, **overrides: Any) -> RunConfiguration:
        """Return a validated copy with the given fields replaced.

        Unset (None) overrides are ignored so optional CLI flags can be
        passed straight through.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return RunConfiguration.model_validate({**self.model_dump(), **updates})


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Args:
        base: Base configuration dict.
        override: Override values (takes precedence).

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config_file(config_file: Path) -> dict[str, Any]:
    """Load raw configuration values from a YAML file.

    Accepts either a flat mapping of RunConfiguration fields or a mapping
    with those fields nested under a ``scriptcheck`` key.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the file is not a YAML mapping.
    """
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with config_file.open() as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file '{config_file}' must be a YAML mapping, got {type(loaded).__name__}")

    section = loaded.get(CONFIG_SECTION, loaded)
    if not isinstance(section, dict):
        raise ValueError(f"'{CONFIG_SECTION}' section in '{config_file}' must be a mapping, got {type(section).__name__}")
    return section


def load_config(
    *,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> RunConfiguration:
    """Load a run configuration with precedence handling.

    Args:
        config_file: Optional path to YAML config file.
        overrides: Optional dict of overrides; None values are ignored.

    Returns:
        Validated RunConfiguration.

    Raises:
        FileNotFoundError: If config_file not found.
        yaml.YAMLError: If YAML is malformed.
        pydantic.ValidationError: If final config fails validation.
    """
    config_dict: dict[str, Any] = {}

    if config_file is not None:
        config_dict = load_config_file(config_file)

    if overrides is not None:
        config_dict = deep_merge(config_dict, {k: v for k, v in overrides.items() if v is not None})

    return RunConfiguration(**config_dict)
