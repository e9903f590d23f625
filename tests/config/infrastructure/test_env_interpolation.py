"""Tests for ${ENV_VAR} collection and interpolation."""

import pytest

from matrix_runner.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_nested_references_collected_in_order(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("MR_A", raising=False)
        monkeypatch.delenv("MR_B", raising=False)
        data = {"x": ["${MR_B}", {"y": "${MR_A}-${MR_B}"}]}

        assert collect_missing_vars(data) == ["MR_B", "MR_A"]

    def test_set_vars_are_not_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MR_SET", "1")

        assert collect_missing_vars({"x": "${MR_SET}"}) == []

    def test_non_string_scalars_ignored(self) -> None:
        assert collect_missing_vars({"n": 3, "f": 1.5, "b": True, "z": None}) == []


class TestInterpolate:
    def test_substitutes_inside_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MR_HOST", "grid.local")

        assert interpolate({"url": "http://${MR_HOST}:4444"}) == {
            "url": "http://grid.local:4444"
        }

    def test_walks_lists(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MR_BROWSER", "firefox")

        assert interpolate(["${MR_BROWSER}", 2]) == ["firefox", 2]

    def test_leaves_plain_values_untouched(self) -> None:
        assert interpolate({"a": "plain", "b": 1}) == {"a": "plain", "b": 1}
