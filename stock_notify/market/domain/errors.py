"""Error types raised while registering or notifying observers."""

from typing import Any

from stock_notify.core.errors import StockNotifyError


def describe_observer(observer: Any) -> str:
    """Return a short human label for an observer: its name, else its type."""
    name = getattr(observer, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(observer).__name__


class InvalidObserverError(StockNotifyError):
    """Raised when attaching None or an object without a callable update()."""

    def __init__(self, observer: Any) -> None:
        self.observer = observer
        super().__init__(
            f"Failed to attach observer: {observer!r} has no callable update()"
        )


class ListenerFailure(StockNotifyError):
    """Raised when a single observer's update() fails internally."""

    def __init__(self, observer: Any, value: float, cause: BaseException) -> None:
        self.observer = observer
        self.value = value
        self.cause = cause
        super().__init__(
            f"Failed to notify {describe_observer(observer)} of value {value}: {cause}"
        )


class NotificationError(StockNotifyError):
    """Raised after a full notification pass in which some listeners failed.

    Every listener that did not fail was still notified.
    """

    def __init__(self, value: float, failures: list[ListenerFailure]) -> None:
        self.value = value
        self.failures = failures
        names = ", ".join(describe_observer(f.observer) for f in failures)
        super().__init__(
            f"Failed to notify {len(failures)} listener(s) of value {value}: {names}"
        )
