"""Error types raised by report infrastructure."""

from pathlib import Path

from matrix_runner.core.errors import MatrixRunnerError


class ReportWriteError(MatrixRunnerError):
    """Raised when report files cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write report {path}: {reason}")
