"""Base exception class for all matrix-runner-specific errors."""


class MatrixRunnerError(Exception):
    """Base class for all matrix-runner errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
