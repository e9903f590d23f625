"""RunSummary — the aggregate result of a completed matrix run."""

from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class RunSummary(Generic[R]):
    """Immutable summary returned when a matrix run ends, however it ended.

    ``requested`` minus ``len(results)`` is the number of tuples that never
    produced a final result (dropped, abandoned or cut off by an interrupt).
    """

    run_id: str | None
    run_name: str
    requested: int
    results: list[R]
    rounds: int
    interrupted: bool
    timed_out: bool

    @property
    def missing(self) -> int:
        return self.requested - len(self.results)

    @property
    def complete(self) -> bool:
        return not self.interrupted and self.missing == 0
