"""Error types raised by case infrastructure."""

from matrix_runner.core.errors import MatrixRunnerError


class CaseLoadError(MatrixRunnerError):
    """Raised when the configured test case cannot be imported."""

    def __init__(self, import_path: str, reason: str) -> None:
        self.import_path = import_path
        super().__init__(f"Failed to load test case '{import_path}': {reason}")
