"""CallableWorkUnit — WorkUnit implementation that runs a CaseFunction on one tuple."""

import threading
import time
from typing import Any

import structlog

from matrix_runner.case.domain.case_function import CaseFunction
from matrix_runner.case.domain.context import CaseContext
from matrix_runner.case.domain.result import CaseResult, CaseStatus
from matrix_runner.execution.domain.outcome import Done, Outcome, Retry
from matrix_runner.matrix.domain.tuple import ClientTuple
from matrix_runner.report.domain.suite import SuiteReport


class CallableWorkUnit:
    """Satisfies the WorkUnit protocol for ``CaseResult`` results.

    Every attempt is recorded into the suite report, including retries and
    failures, so a dropped unit is still visible in the generated report.
    """

    def __init__(
        self,
        clients: ClientTuple,
        case_function: CaseFunction,
        report: SuiteReport,
        payload: dict[str, Any] | None = None,
        logger: Any | None = None,
    ) -> None:
        self._clients = clients
        self._case_function = case_function
        self._report = report
        self._payload = dict(payload) if payload is not None else {}
        self._logger = logger if logger is not None else structlog.get_logger()
        self._stop_event = threading.Event()
        self._index = 0
        self._total = 0
        self._attempts = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def total(self) -> int:
        return self._total

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def terminated(self) -> bool:
        return self._stop_event.is_set()

    def set_index(self, index: int) -> None:
        self._index = index

    def set_total(self, total: int) -> None:
        self._total = total

    def terminate(self) -> None:
        self._stop_event.set()

    def attempt(self) -> Outcome[CaseResult]:
        self._attempts += 1
        context = CaseContext(
            clients=self._clients,
            index=self._index,
            total=self._total,
            attempt=self._attempts,
            logger=self._logger.bind(index=self._index, attempt=self._attempts),
            payload=self._payload,
            stop_event=self._stop_event,
        )
        started_at = time.monotonic()
        try:
            value = self._case_function(context)
        except Exception as exc:
            self._record(
                status="failed",
                started_at=started_at,
                error=f"{type(exc).__name__}: {exc}",
            )
            raise

        match value:
            case Retry():
                self._record(status="retry", started_at=started_at)
                return value
            case Done(inner):
                return Done(self._record(status="passed", started_at=started_at, value=inner))
            case _:
                return Done(self._record(status="passed", started_at=started_at, value=value))

    def _record(
        self,
        status: CaseStatus,
        started_at: float,
        value: Any = None,
        error: str | None = None,
    ) -> CaseResult:
        result = CaseResult(
            index=self._index,
            clients=[client.label for client in self._clients.clients],
            status=status,
            attempts=self._attempts,
            duration_ms=int((time.monotonic() - started_at) * 1000),
            value=value,
            error=error,
        )
        self._report.record(result)
        return result
