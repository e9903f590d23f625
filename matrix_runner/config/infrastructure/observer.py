"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str) -> None:
        self._log.info("config.loaded", name=name, version=version)

    def config_unbounded_rounds_warning(self, name: str) -> None:
        self._log.warning(
            "config.unbounded_rounds_warning",
            name=name,
            message="Neither max_rounds nor timeout_seconds is set; a unit that"
            " always retries will only stop on interrupt",
        )
