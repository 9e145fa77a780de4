"""Observer port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, symbol: str, users: int) -> None: ...

    def config_empty_feed_warning(self, symbol: str) -> None: ...
