"""ProgressExecutionObserver — renders a Rich progress bar for the run to stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _CountsColumn(ProgressColumn):
    """Renders done+dropped/total with colors matching the bar segments."""

    def render(self, task: Task) -> Text:
        done = int(task.fields.get("done", 0))
        dropped = int(task.fields.get("dropped", 0))
        total = int(task.total or 0)
        return Text.assemble(
            (str(done), "bright_green"),
            ("+", "dim white"),
            (str(dropped), "red"),
            ("/", "dim white"),
            (str(total), "default"),
        )


class _ThreeSegmentBarColumn(ProgressColumn):
    """ProgressColumn that renders three segments: done, dropped, remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        bar_width = self.bar_width or 40
        total = task.total or 0
        if total > 0:
            done_cells = int(int(task.fields.get("done", 0)) / total * bar_width)
            dropped = int(task.fields.get("dropped", 0))
            dropped_cells = min(int(dropped / total * bar_width), bar_width - done_cells)
        else:
            done_cells = 0
            dropped_cells = 0
        remaining_cells = bar_width - done_cells - dropped_cells

        result = Text()
        result.append("█" * done_cells, style="bright_green")
        result.append("▒" * dropped_cells, style="red")
        result.append("░" * remaining_cells, style="dim white")
        return result


class ProgressExecutionObserver:
    """Renders one progress row for the whole matrix on stderr.

    The description shows the current round; units that asked to be retried stay
    in the remaining segment until they finish in a later round.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from ExecutionObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._done = 0
        self._dropped = 0
        self._total = 0
        self._round_number = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def done(self) -> int:
        return self._done

    @property
    def dropped(self) -> int:
        return self._dropped

    @property
    def round_number(self) -> int:
        return self._round_number

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            description=f"Round {self._round_number}",
            completed=self._done + self._dropped,
            done=self._done,
            dropped=self._dropped,
        )

    def run_started(
        self,
        run_name: str,
        total_units: int,
        tuple_size: int,
        num_threads: int,
    ) -> None:
        self._done = 0
        self._dropped = 0
        self._total = total_units
        self._round_number = 0

        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("[bold]{task.description}[/bold]"),
            _ThreeSegmentBarColumn(bar_width=40),
            _CountsColumn(),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            refresh_per_second=10,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description="Round 0", total=float(total_units), done=0, dropped=0
        )
        self._progress.start()

    def run_completed(
        self,
        run_name: str,
        total_results: int,
        rounds: int,
        interrupted: bool,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._refresh()
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def round_started(self, round_number: int, pending: int) -> None:
        self._round_number = round_number
        self._refresh()

    def round_completed(
        self,
        round_number: int,
        finals: int,
        retrying: int,
        dropped: int,
    ) -> None:
        pass

    def unit_completed(self, index: int) -> None:
        self._done += 1
        self._refresh()

    def unit_retry(self, index: int, round_number: int) -> None:
        pass

    def unit_failed(self, index: int, reason: str) -> None:
        self._dropped += 1
        self._refresh()

    def unit_terminate_failed(self, index: int, reason: str) -> None:
        pass

    def max_rounds_reached(self, max_rounds: int, abandoned: int) -> None:
        pass

    def log_sink_failed(self, reason: str) -> None:
        pass

    def dispatch_failed(self, reason: str) -> None:
        pass

    def report_failed(self, reason: str) -> None:
        pass

    def run_interrupted(self, run_name: str) -> None:
        pass

    def shutdown_completed(self, run_name: str) -> None:
        pass
