"""Fake LogSinkObserver for use in tests — records events without mocking."""


class FakeLogSinkObserver:
    def __init__(self) -> None:
        self.created: list[str] = []
        self.failed: list[dict[str, str]] = []

    def log_sink_created(self, path: str) -> None:
        self.created.append(path)

    def log_sink_failed(self, path: str, reason: str) -> None:
        self.failed.append({"path": path, "reason": reason})
