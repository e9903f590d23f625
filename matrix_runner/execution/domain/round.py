"""RoundResult — the partitioned outcomes of one fully drained round."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from matrix_runner.execution.domain.work_unit import WorkUnit

R = TypeVar("R")


@dataclass
class RoundResult(Generic[R]):
    """Finals, the units to resubmit, and how many units were dropped."""

    finals: list[R] = field(default_factory=list)
    retrying: list[WorkUnit[R]] = field(default_factory=list)
    dropped: int = 0
