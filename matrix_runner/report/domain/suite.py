"""SuiteReport — thread-safe container collecting every case attempt of a run."""

import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TypeAlias

from matrix_runner.case.domain.result import CaseResult

Clock: TypeAlias = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SuiteReport:
    """Collects CaseResult entries recorded concurrently by worker threads.

    The start timestamp is taken at construction; ``mark_stopped`` keeps the
    first stop timestamp it is given.
    """

    def __init__(
        self,
        name: str,
        parent_suite: str | None = None,
        clock: Clock = _utc_now,
    ) -> None:
        self._name = name
        self._parent_suite = parent_suite
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: list[CaseResult] = []
        self._started_at = clock()
        self._stopped_at: datetime | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent_suite(self) -> str | None:
        return self._parent_suite

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def stopped_at(self) -> datetime | None:
        return self._stopped_at

    @property
    def entries(self) -> list[CaseResult]:
        with self._lock:
            return list(self._entries)

    def record(self, entry: CaseResult) -> None:
        with self._lock:
            self._entries.append(entry)

    def mark_stopped(self) -> None:
        with self._lock:
            if self._stopped_at is None:
                self._stopped_at = self._clock()
