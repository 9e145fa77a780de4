"""SubjectObserver port: domain events emitted while a Subject dispatches."""

from typing import Protocol


class SubjectObserver(Protocol):
    """Observer port for subject domain events.

    Implementations may log to structlog or record for tests.
    """

    def observer_attached(self, observer: str, count: int) -> None: ...

    def observer_detached(self, observer: str, count: int) -> None: ...

    def value_changed(self, value: float, observer_count: int) -> None: ...

    def listener_failed(self, observer: str, value: float, reason: str) -> None: ...

    def notification_pass_completed(
        self, value: float, notified: int, failed: int
    ) -> None: ...


class SilentSubjectObserver:
    """Discards every subject event. Used when no observer is injected."""

    def observer_attached(self, observer: str, count: int) -> None:
        pass

    def observer_detached(self, observer: str, count: int) -> None:
        pass

    def value_changed(self, value: float, observer_count: int) -> None:
        pass

    def listener_failed(self, observer: str, value: float, reason: str) -> None:
        pass

    def notification_pass_completed(
        self, value: float, notified: int, failed: int
    ) -> None:
        pass
