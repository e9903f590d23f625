"""CompositeExecutionObserver — fans out all events to a list of observers."""

from matrix_runner.execution.domain.observer import ExecutionObserver


class CompositeExecutionObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from ExecutionObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[ExecutionObserver]) -> None:
        self._observers = observers

    def run_started(
        self,
        run_name: str,
        total_units: int,
        tuple_size: int,
        num_threads: int,
    ) -> None:
        for obs in self._observers:
            obs.run_started(
                run_name=run_name,
                total_units=total_units,
                tuple_size=tuple_size,
                num_threads=num_threads,
            )

    def run_completed(
        self,
        run_name: str,
        total_results: int,
        rounds: int,
        interrupted: bool,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.run_completed(
                run_name=run_name,
                total_results=total_results,
                rounds=rounds,
                interrupted=interrupted,
                elapsed_seconds=elapsed_seconds,
            )

    def round_started(self, round_number: int, pending: int) -> None:
        for obs in self._observers:
            obs.round_started(round_number=round_number, pending=pending)

    def round_completed(
        self,
        round_number: int,
        finals: int,
        retrying: int,
        dropped: int,
    ) -> None:
        for obs in self._observers:
            obs.round_completed(
                round_number=round_number,
                finals=finals,
                retrying=retrying,
                dropped=dropped,
            )

    def unit_completed(self, index: int) -> None:
        for obs in self._observers:
            obs.unit_completed(index=index)

    def unit_retry(self, index: int, round_number: int) -> None:
        for obs in self._observers:
            obs.unit_retry(index=index, round_number=round_number)

    def unit_failed(self, index: int, reason: str) -> None:
        for obs in self._observers:
            obs.unit_failed(index=index, reason=reason)

    def unit_terminate_failed(self, index: int, reason: str) -> None:
        for obs in self._observers:
            obs.unit_terminate_failed(index=index, reason=reason)

    def max_rounds_reached(self, max_rounds: int, abandoned: int) -> None:
        for obs in self._observers:
            obs.max_rounds_reached(max_rounds=max_rounds, abandoned=abandoned)

    def log_sink_failed(self, reason: str) -> None:
        for obs in self._observers:
            obs.log_sink_failed(reason=reason)

    def dispatch_failed(self, reason: str) -> None:
        for obs in self._observers:
            obs.dispatch_failed(reason=reason)

    def report_failed(self, reason: str) -> None:
        for obs in self._observers:
            obs.report_failed(reason=reason)

    def run_interrupted(self, run_name: str) -> None:
        for obs in self._observers:
            obs.run_interrupted(run_name=run_name)

    def shutdown_completed(self, run_name: str) -> None:
        for obs in self._observers:
            obs.shutdown_completed(run_name=run_name)
