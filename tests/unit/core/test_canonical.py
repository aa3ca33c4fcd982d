# tests/unit/core/test_canonical.py
"""Unit tests for canonical JSON serialization."""

from __future__ import annotations

import math

import pytest

from propcheck.core.canonical import canonical_json


class TestCanonicalJson:
    """Tests for RFC 8785 canonical output."""

    def test_primitives(self) -> None:
        assert canonical_json(None) == "null"
        assert canonical_json(True) == "true"
        assert canonical_json(False) == "false"
        assert canonical_json(0) == "0"
        assert canonical_json("") == '""'

    def test_zero_float_is_zero(self) -> None:
        assert canonical_json(0.0) == "0"

    def test_keys_sorted_no_whitespace(self) -> None:
        assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_tuples_become_arrays(self) -> None:
        assert canonical_json((1, "x")) == '[1,"x"]'

    def test_non_ascii_kept_verbatim(self) -> None:
        assert canonical_json("é") == '"é"'

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            canonical_json([value])

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(TypeError, match="keys must be strings"):
            canonical_json({1: "x"})

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(TypeError, match="set"):
            canonical_json({1, 2})
