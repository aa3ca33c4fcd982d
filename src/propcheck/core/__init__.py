# src/propcheck/core/__init__.py
"""Core infrastructure: Errors, Configuration, Logging, Canonical JSON."""

from propcheck.core.canonical import canonical_json
from propcheck.core.config import RunnerSettings, deep_merge, load_settings
from propcheck.core.errors import ConfigurationError, PropertyFailedError
from propcheck.core.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "PropertyFailedError",
    "RunnerSettings",
    "canonical_json",
    "configure_logging",
    "deep_merge",
    "get_logger",
    "load_settings",
]
