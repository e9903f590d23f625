"""WorkUnit and WorkUnitFactory Protocols — what the engine needs from a unit of work."""

from typing import Any, Protocol, TypeVar

from matrix_runner.execution.domain.outcome import Outcome
from matrix_runner.matrix.domain.tuple import ClientTuple

R = TypeVar("R")


class WorkUnit(Protocol[R]):
    """Runnable wrapper around one tuple's test.

    ``attempt`` may be called once per round for as long as it returns ``Retry``.
    ``terminate`` is advisory: it must not block and must be safe to call from
    any thread, at any time, any number of times.
    """

    @property
    def index(self) -> int: ...

    def set_index(self, index: int) -> None: ...

    def set_total(self, total: int) -> None: ...

    def attempt(self) -> Outcome[R]: ...

    def terminate(self) -> None: ...


class WorkUnitFactory(Protocol[R]):
    """Constructs one WorkUnit per tuple. ``log_sink`` is None when it could not be created."""

    def create(self, clients: ClientTuple, log_sink: Any | None) -> WorkUnit[R]: ...
