"""Observer port for the execution domain — defines events in domain language."""

from typing import Protocol


class ExecutionObserver(Protocol):
    """Observer port emitting structured events during a matrix run.

    Implementations may log to structlog, render progress, or record for tests.
    Round and unit outcome events are emitted from the orchestrating thread, never
    from worker threads. Interrupt and shutdown events may arrive from any thread.
    """

    def run_started(
        self,
        run_name: str,
        total_units: int,
        tuple_size: int,
        num_threads: int,
    ) -> None: ...

    def run_completed(
        self,
        run_name: str,
        total_results: int,
        rounds: int,
        interrupted: bool,
        elapsed_seconds: float,
    ) -> None: ...

    def round_started(self, round_number: int, pending: int) -> None: ...

    def round_completed(
        self,
        round_number: int,
        finals: int,
        retrying: int,
        dropped: int,
    ) -> None: ...

    def unit_completed(self, index: int) -> None: ...

    def unit_retry(self, index: int, round_number: int) -> None: ...

    def unit_failed(self, index: int, reason: str) -> None: ...

    def unit_terminate_failed(self, index: int, reason: str) -> None: ...

    def max_rounds_reached(self, max_rounds: int, abandoned: int) -> None: ...

    def log_sink_failed(self, reason: str) -> None: ...

    def dispatch_failed(self, reason: str) -> None: ...

    def report_failed(self, reason: str) -> None: ...

    def run_interrupted(self, run_name: str) -> None: ...

    def shutdown_completed(self, run_name: str) -> None: ...
