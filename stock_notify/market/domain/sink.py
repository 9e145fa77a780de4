"""NotificationSink port: where a listener writes its notification line."""

from typing import Any, Protocol


class NotificationSink(Protocol):
    """Minimal logging surface a listener needs.

    A structlog bound logger satisfies this structurally.
    """

    def info(self, event: str, **kw: Any) -> Any: ...
