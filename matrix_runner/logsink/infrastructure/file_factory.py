"""Per-run file logger factory."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import IO, Any, TypeAlias

import structlog

from matrix_runner.logsink.domain.observer import LogSinkObserver

Clock: TypeAlias = Callable[[], datetime]


def log_file_path(
    log_dir: Path, run_id: str | None, run_name: str, now: datetime
) -> Path:
    """``{log_dir}/{run_id}_{run_name}/test_{YYYY-MM-DD-HHMMSS}.log``.

    The run id prefix is left out when it is missing or the literal ``"null"``.
    """
    prefix = "" if run_id is None or run_id == "null" else f"{run_id}_"
    return log_dir / f"{prefix}{run_name}" / f"test_{now.strftime('%Y-%m-%d-%H%M%S')}.log"


class FileLogSinkFactory:
    """Satisfies the LogSinkFactory protocol.

    Loggers drop events below INFO. Open files are kept until ``close()``.
    """

    def __init__(
        self,
        log_dir: Path,
        observer: LogSinkObserver,
        clock: Clock = datetime.now,
    ) -> None:
        self._log_dir = log_dir
        self._observer = observer
        self._clock = clock
        self._files: list[IO[str]] = []

    def create(self, run_id: str | None, run_name: str) -> Any | None:
        path = log_file_path(
            log_dir=self._log_dir, run_id=run_id, run_name=run_name, now=self._clock()
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = path.open("w", encoding="utf-8")
        except OSError as exc:
            self._observer.log_sink_failed(path=str(path), reason=str(exc))
            return None

        self._files.append(fh)
        self._observer.log_sink_created(path=str(path))
        return structlog.wrap_logger(
            structlog.WriteLogger(file=fh),
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.KeyValueRenderer(
                    key_order=["timestamp", "level", "event"]
                ),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
            context_class=dict,
        )

    def close(self) -> None:
        for fh in self._files:
            fh.close()
        self._files = []
