"""RoundDispatcher — runs one batch of work units to completion on a shared pool."""

from collections.abc import Sequence
from concurrent.futures import CancelledError, Executor
from typing import Generic, TypeVar

from matrix_runner.execution.domain.observer import ExecutionObserver
from matrix_runner.execution.domain.outcome import Done, Retry
from matrix_runner.execution.domain.round import RoundResult
from matrix_runner.execution.domain.work_unit import WorkUnit

R = TypeVar("R")


class RoundDispatcher(Generic[R]):
    """Submits a batch to the pool and blocks until every unit has an outcome.

    A unit that raises (or is cancelled by a force-stopped pool before it started)
    is reported and dropped: it is neither retried nor part of the finals.
    """

    def __init__(self, observer: ExecutionObserver) -> None:
        self._observer = observer

    def run_round(
        self,
        pool: Executor,
        units: Sequence[WorkUnit[R]],
        round_number: int,
    ) -> RoundResult[R]:
        """Run ``units`` concurrently and partition their outcomes.

        Futures are resolved with ``Future.result()`` rather than
        ``concurrent.futures.wait``: futures cancelled by
        ``shutdown(cancel_futures=True)`` never notify waiters, but they do wake
        ``result()``.

        Raises:
            RuntimeError: if the pool has already been shut down.
        """
        submitted = [(unit, pool.submit(unit.attempt)) for unit in units]

        result: RoundResult[R] = RoundResult()
        for unit, future in submitted:
            try:
                outcome = future.result()
            except CancelledError:
                self._drop(result, unit, reason="cancelled before it started")
                continue
            except Exception as exc:
                self._drop(result, unit, reason=f"{type(exc).__name__}: {exc}")
                continue

            match outcome:
                case Retry():
                    result.retrying.append(unit)
                    self._observer.unit_retry(index=unit.index, round_number=round_number)
                case Done(value):
                    result.finals.append(value)
                    self._observer.unit_completed(index=unit.index)
                case _:
                    self._drop(
                        result,
                        unit,
                        reason=f"returned {type(outcome).__name__} instead of an Outcome",
                    )

        return result

    def _drop(self, result: RoundResult[R], unit: WorkUnit[R], reason: str) -> None:
        result.dropped += 1
        self._observer.unit_failed(index=unit.index, reason=reason)
