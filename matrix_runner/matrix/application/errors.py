"""Error types raised while building the test matrix."""

from matrix_runner.core.errors import MatrixRunnerError


class MatrixBuildError(MatrixRunnerError):
    """Raised when the client list and tuple size cannot produce a matrix."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to build test matrix: {reason}")
