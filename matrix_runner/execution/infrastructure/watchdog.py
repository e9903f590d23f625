"""Timer-based watchdog that interrupts a run which overstays its budget."""

import threading
from collections.abc import Callable


class TimeoutWatchdog:
    """Arms a daemon ``threading.Timer`` that invokes ``on_timeout`` once.

    ``stop()`` disarms the timer; it is a no-op when the timer already fired.
    """

    def __init__(self, timeout_seconds: float, on_timeout: Callable[[], None]) -> None:
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self._timeout_seconds = timeout_seconds
        self._on_timeout = on_timeout
        self._fired = threading.Event()
        self._timer: threading.Timer | None = None

    @property
    def fired(self) -> bool:
        return self._fired.is_set()

    def start(self) -> None:
        if self._timer is not None:
            return
        timer = threading.Timer(self._timeout_seconds, self._fire)
        timer.daemon = True
        timer.start()
        self._timer = timer

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._fired.set()
        self._on_timeout()
