# tests/unit/core/test_config.py
"""Unit tests for runner settings and layered loading.

Tests RunnerSettings validation, deep_merge and load_settings precedence.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from propcheck.core.config import RunnerSettings, deep_merge, load_settings

# =============================================================================
# RunnerSettings
# =============================================================================


class TestRunnerSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        settings = RunnerSettings()
        assert settings.num_runs == 100
        assert settings.seed is None
        assert settings.max_shrinks == 1000
        assert settings.max_shrink_candidates == 10_000
        assert settings.path is None
        assert settings.max_depth is None

    def test_frozen(self) -> None:
        settings = RunnerSettings()
        with pytest.raises(ValidationError):
            settings.num_runs = 5  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(runs=5)  # type: ignore[call-arg]

    def test_num_runs_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(num_runs=0)

    def test_max_shrinks_may_be_zero(self) -> None:
        assert RunnerSettings(max_shrinks=0).max_shrinks == 0

    def test_negative_max_shrinks_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(max_shrinks=-1)

    def test_negative_max_shrink_candidates_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(max_shrink_candidates=-1)

    @pytest.mark.parametrize("path", ["0", "3:0:1", "12:4"])
    def test_valid_paths(self, path: str) -> None:
        assert RunnerSettings(path=path).path == path

    @pytest.mark.parametrize("path", ["", "a", "1:", ":1", "1::2", "-1"])
    def test_invalid_paths(self, path: str) -> None:
        with pytest.raises(ValidationError, match="path"):
            RunnerSettings(path=path)

    def test_negative_max_depth_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RunnerSettings(max_depth=-1)


# =============================================================================
# deep_merge
# =============================================================================


class TestDeepMerge:
    """Tests for deep_merge utility."""

    def test_flat_override(self) -> None:
        """Override replaces flat values."""
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"top": {"a": 1, "b": 2}, "flat": "value"}
        assert deep_merge(base, {"top": {"b": 3}}) == {"top": {"a": 1, "b": 3}, "flat": "value"}

    def test_does_not_mutate_inputs(self) -> None:
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}
        deep_merge(base, override)
        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}


# =============================================================================
# load_settings
# =============================================================================


class TestLoadSettings:
    """Tests for settings precedence."""

    def test_no_sources_gives_defaults(self) -> None:
        assert load_settings() == RunnerSettings()

    def test_file_values_applied(self, tmp_path: Path) -> None:
        config_file = tmp_path / "propcheck.yaml"
        config_file.write_text(yaml.safe_dump({"num_runs": 25, "seed": 7}))
        settings = load_settings(config_file=config_file)
        assert settings.num_runs == 25
        assert settings.seed == 7

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "propcheck.yaml"
        config_file.write_text(yaml.safe_dump({"num_runs": 25, "seed": 7}))
        settings = load_settings(config_file=config_file, overrides={"seed": 9})
        assert settings.num_runs == 25
        assert settings.seed == 9

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        """Unset CLI flags do not mask file values."""
        config_file = tmp_path / "propcheck.yaml"
        config_file.write_text(yaml.safe_dump({"max_depth": 1}))
        settings = load_settings(config_file=config_file, overrides={"max_depth": None})
        assert settings.max_depth == 1

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_settings(config_file=config_file) == RunnerSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_settings(config_file=tmp_path / "missing.yaml")

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(config_file=config_file)

    def test_invalid_value_in_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(yaml.safe_dump({"num_runs": -3}))
        with pytest.raises(ValidationError):
            load_settings(config_file=config_file)
