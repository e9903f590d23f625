"""Tests for the matrix-runner typer application."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from matrix_runner.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _write_config(
    tmp_path: Path,
    test_case: str = "tests.case.sample_cases:passing",
    tuple_size: int = 2,
) -> Path:
    path = tmp_path / "matrix.yaml"
    path.write_text(
        f"""
name: cli-interop
version: "1"
clients:
  - browser_name: firefox
  - browser_name: chrome
    version: "126"
suite:
  name: cli-suite
  test_case: {test_case}
  tuple_size: {tuple_size}
execution:
  num_threads: 2
  max_rounds: 3
report:
  output_dir: {tmp_path / "results"}
  log_dir: {tmp_path / "logs"}
""",
        encoding="utf-8",
    )
    return path


class TestRunCommand:
    def test_complete_run_exits_zero_and_writes_report(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert result.exit_code == 0, result.output
        assert "3/3 tuples finished" in result.output
        [report_file] = (tmp_path / "results").glob("cli-interop_*.json")
        data = json.loads(report_file.read_text(encoding="utf-8"))
        assert data["summary"]["passed"] == 3

    def test_log_file_created_per_run(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path)

        runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert list((tmp_path / "logs" / "cli-suite").glob("test_*.log"))

    def test_retrying_case_finishes(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, test_case="tests.case.sample_cases:retry_once")

        result = runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert result.exit_code == 0, result.output

    def test_failing_case_exits_one(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, test_case="tests.case.sample_cases:failing")

        result = runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert result.exit_code == 1
        assert "0/3 tuples finished" in result.output

    def test_output_dir_option_overrides_config(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, tuple_size=1)
        override = tmp_path / "elsewhere"

        result = runner.invoke(
            app,
            ["run", str(config), "--log-format", "json", "--output-dir", str(override)],
        )

        assert result.exit_code == 0, result.output
        assert list(override.glob("cli-interop_*.json"))
        assert not (tmp_path / "results").exists()

    def test_threads_option_rejects_zero(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["run", str(config), "--threads", "0"])

        assert result.exit_code != 0

    def test_missing_config_exits_one(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["run", str(tmp_path / "absent.yaml"), "--log-format", "json"]
        )

        assert result.exit_code == 1
        assert "file not found" in result.output

    def test_unknown_test_case_exits_one(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, test_case="tests.case.sample_cases:nope")

        result = runner.invoke(app, ["run", str(config), "--log-format", "json"])

        assert result.exit_code == 1
        assert "Failed to load test case" in result.output

    def test_invalid_log_format_exits_one(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["run", str(config), "--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestTuplesCommand:
    def test_lists_every_tuple(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["tuples", str(config)])

        assert result.exit_code == 0, result.output
        assert "firefox + firefox" in result.output
        assert "firefox + chrome 126" in result.output
        assert "chrome 126 + chrome 126" in result.output
        assert "3 tuples of size 2" in result.output

    def test_missing_config_exits_one(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["tuples", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 1
        assert "file not found" in result.output
