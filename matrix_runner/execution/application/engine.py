"""ExecutionEngine — drives rounds of work units until none ask to be retried."""

import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Generic, TypeAlias, TypeVar

from matrix_runner.execution.application.dispatcher import RoundDispatcher
from matrix_runner.execution.domain.log_sink import LogSinkFactory
from matrix_runner.execution.domain.observer import ExecutionObserver
from matrix_runner.execution.domain.report_sink import ReportSink
from matrix_runner.execution.domain.work_unit import WorkUnit, WorkUnitFactory
from matrix_runner.matrix.domain.tuple import ClientTuple

R = TypeVar("R")

PoolFactory: TypeAlias = Callable[[int], Executor]


def thread_pool(num_threads: int) -> Executor:
    return ThreadPoolExecutor(max_workers=num_threads, thread_name_prefix="matrix-unit")


class ExecutionEngine(Generic[R]):
    """Runs one work unit per tuple on a bounded pool, round after round.

    Round n+1 is only computed from the ``Retry`` outcomes of round n once that
    round has fully drained. ``interrupt()`` may be called from any thread; it
    stops further rounds and force-stops the pool without waiting for the current
    round. ``run()`` never raises: whatever finals were accumulated are returned.

    An engine runs at most once. Once interrupted it cannot be resumed; build a
    new engine to run the matrix again.
    """

    def __init__(
        self,
        tuples: Sequence[ClientTuple],
        work_unit_factory: WorkUnitFactory[R],
        report_sink: ReportSink,
        log_sink_factory: LogSinkFactory,
        observer: ExecutionObserver,
        num_threads: int,
        run_name: str,
        run_id: str | None = None,
        max_rounds: int | None = None,
        pool_factory: PoolFactory = thread_pool,
    ) -> None:
        if num_threads < 1:
            raise ValueError(f"num_threads must be at least 1, got {num_threads}")
        if max_rounds is not None and max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")
        self._tuples = list(tuples)
        self._work_unit_factory = work_unit_factory
        self._report_sink = report_sink
        self._log_sink_factory = log_sink_factory
        self._observer = observer
        self._num_threads = num_threads
        self._run_name = run_name
        self._run_id = run_id
        self._max_rounds = max_rounds
        self._pool_factory = pool_factory
        self._dispatcher: RoundDispatcher[R] = RoundDispatcher(observer=observer)

        # Guards _pool, _units and _interrupted.
        self._lock = threading.Lock()
        self._pool: Executor | None = None
        self._units: list[WorkUnit[R]] = []
        self._interrupted = False
        self._rounds_completed = 0

    @property
    def interrupted(self) -> bool:
        return self._interrupted

    @property
    def rounds_completed(self) -> int:
        return self._rounds_completed

    @property
    def units(self) -> tuple[WorkUnit[R], ...]:
        with self._lock:
            return tuple(self._units)

    def run(self) -> list[R]:
        """Execute every tuple and return the final results, round by round.

        Returns an empty list without creating a pool when there are no tuples.
        """
        total = len(self._tuples)
        if total < 1:
            return []

        started_at = time.monotonic()
        results: list[R] = []
        self._observer.run_started(
            run_name=self._run_name,
            total_units=total,
            tuple_size=self._tuples[0].size,
            num_threads=self._num_threads,
        )

        try:
            units = self._create_units(log_sink=self._create_log_sink())
            with self._lock:
                self._units.extend(units)
                self._pool = self._pool_factory(self._num_threads)
            self._run_rounds(units=units, results=results)
        except Exception as exc:
            self._observer.dispatch_failed(reason=f"{type(exc).__name__}: {exc}")
        finally:
            try:
                self._finish_report()
            finally:
                self._shutdown()
                self._observer.run_completed(
                    run_name=self._run_name,
                    total_results=len(results),
                    rounds=self._rounds_completed,
                    interrupted=self._interrupted,
                    elapsed_seconds=time.monotonic() - started_at,
                )

        return results

    def interrupt(self) -> None:
        """Stop starting new rounds and force-stop the pool. Safe from any thread."""
        with self._lock:
            first = not self._interrupted
            self._interrupted = True
        if first:
            self._observer.run_interrupted(run_name=self._run_name)
        self._shutdown()

    def _create_log_sink(self) -> Any | None:
        try:
            return self._log_sink_factory.create(
                run_id=self._run_id, run_name=self._run_name
            )
        except Exception as exc:
            self._observer.log_sink_failed(reason=f"{type(exc).__name__}: {exc}")
            return None

    def _create_units(self, log_sink: Any | None) -> list[WorkUnit[R]]:
        total = len(self._tuples)
        units: list[WorkUnit[R]] = []
        for position, clients in enumerate(self._tuples, start=1):
            unit = self._work_unit_factory.create(clients=clients, log_sink=log_sink)
            unit.set_index(position)
            unit.set_total(total)
            units.append(unit)
        return units

    def _run_rounds(self, units: list[WorkUnit[R]], results: list[R]) -> None:
        pending = units
        while pending:
            with self._lock:
                pool = None if self._interrupted else self._pool
            if pool is None:
                return
            if self._max_rounds is not None and self._rounds_completed >= self._max_rounds:
                self._observer.max_rounds_reached(
                    max_rounds=self._max_rounds, abandoned=len(pending)
                )
                return

            round_number = self._rounds_completed + 1
            self._observer.round_started(round_number=round_number, pending=len(pending))
            outcome = self._dispatcher.run_round(
                pool=pool, units=pending, round_number=round_number
            )
            self._rounds_completed = round_number
            results.extend(outcome.finals)
            pending = outcome.retrying
            self._observer.round_completed(
                round_number=round_number,
                finals=len(outcome.finals),
                retrying=len(outcome.retrying),
                dropped=outcome.dropped,
            )

    def _finish_report(self) -> None:
        try:
            self._report_sink.mark_stopped()
            self._report_sink.generate_report_files()
        except Exception as exc:
            self._observer.report_failed(reason=f"{type(exc).__name__}: {exc}")

    def _shutdown(self) -> None:
        """Terminate every unit ever created, then force-stop the pool. Runs once."""
        with self._lock:
            pool = self._pool
            if pool is None:
                return
            for unit in self._units:
                try:
                    unit.terminate()
                except Exception as exc:
                    self._observer.unit_terminate_failed(
                        index=unit.index, reason=f"{type(exc).__name__}: {exc}"
                    )
            pool.shutdown(wait=False, cancel_futures=True)
            self._pool = None
        self._observer.shutdown_completed(run_name=self._run_name)
