# src/propcheck/core/config.py
"""Runner configuration schema and loading.

Uses Pydantic for validation with frozen (immutable) models.
Configuration precedence: overrides (CLI flags, keyword arguments) >
YAML file > defaults.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

_PATH_PATTERN = re.compile(r"\d+(:\d+)*")


class RunnerSettings(BaseModel):
    """Settings for a single property run."""

    model_config = {"frozen": True, "extra": "forbid"}

    num_runs: int = Field(
        default=100,
        gt=0,
        description="Number of generated trials before declaring success",
    )
    seed: int | None = Field(
        default=None,
        description="Run seed. A time-derived seed is chosen (and reported) when omitted",
    )
    max_shrinks: int = Field(
        default=1000,
        ge=0,
        description="Maximum number of successful shrink steps before the search stops",
    )
    max_shrink_candidates: int = Field(
        default=10_000,
        ge=0,
        description="Maximum number of shrink candidates evaluated, across all steps, before the search stops",
    )
    path: str | None = Field(
        default=None,
        description="Replay path 'trial:shrink:...' from a previous failure report (requires seed)",
    )
    max_depth: int | None = Field(
        default=None,
        ge=0,
        description="Nesting bound used by the CLI when building structured arbitraries",
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str | None) -> str | None:
        """Replay paths are colon-separated non-negative integers."""
        if value is not None and not _PATH_PATTERN.fullmatch(value):
            raise ValueError(f"path must look like '3' or '3:0:1', got {value!r}")
        return value


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


def load_settings(
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> RunnerSettings:
    """Load runner settings with precedence handling.

    Precedence (highest to lowest):
    1. overrides - Direct overrides (CLI flags, keyword arguments)
    2. config_file - User's YAML configuration file
    3. defaults - Built-in Pydantic defaults

    Overrides whose value is None are ignored, so unset CLI flags do not
    mask values from the file.

    Raises:
        FileNotFoundError: If config_file does not exist.
        yaml.YAMLError: If YAML is malformed.
        ValueError: If the YAML document is not a mapping.
        pydantic.ValidationError: If final settings fail validation.
    """
    config_dict: dict[str, Any] = {}

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        with config_file.open() as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_file} must be a YAML mapping, got {type(loaded).__name__}")
        config_dict = loaded

    if overrides is not None:
        config_dict = deep_merge(config_dict, {k: v for k, v in overrides.items() if v is not None})

    return RunnerSettings(**config_dict)
