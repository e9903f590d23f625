"""Observer port for per-run log sink provisioning."""

from typing import Protocol


class LogSinkObserver(Protocol):
    def log_sink_created(self, path: str) -> None: ...

    def log_sink_failed(self, path: str, reason: str) -> None: ...
