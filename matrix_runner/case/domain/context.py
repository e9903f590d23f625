"""What a test callable receives for one attempt."""

import threading
from dataclasses import dataclass, field
from typing import Any

from matrix_runner.matrix.domain.tuple import ClientTuple


@dataclass(frozen=True)
class CaseContext:
    clients: ClientTuple
    index: int
    total: int
    attempt: int
    logger: Any
    payload: dict[str, Any] = field(default_factory=dict)
    stop_event: threading.Event = field(default_factory=threading.Event)

    @property
    def should_stop(self) -> bool:
        """True once the run was interrupted; long-running tests should bail out."""
        return self.stop_event.is_set()
