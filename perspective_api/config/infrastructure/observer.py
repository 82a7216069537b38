"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, base_url: str, timeout_seconds: float) -> None:
        self._log.info(
            "config.loaded", base_url=base_url, timeout_seconds=timeout_seconds
        )
