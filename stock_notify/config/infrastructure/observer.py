"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, symbol: str, users: int) -> None:
        self._log.info("config.loaded", symbol=symbol, users=users)

    def config_empty_feed_warning(self, symbol: str) -> None:
        self._log.warning(
            "config.empty_feed_warning",
            symbol=symbol,
            message="No prices configured; listeners will not be notified",
        )
