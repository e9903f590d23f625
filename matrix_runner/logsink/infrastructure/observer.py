"""Structlog implementation of the LogSinkObserver port."""

import structlog


class StructlogLogSinkObserver:
    """Delegates log sink events to structlog.

    Satisfies the LogSinkObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def log_sink_created(self, path: str) -> None:
        self._log.info("log_sink.created", path=path)

    def log_sink_failed(self, path: str, reason: str) -> None:
        self._log.error("log_sink.failed", path=path, reason=reason)
