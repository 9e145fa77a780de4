"""Structlog implementation of the SubjectObserver port."""

import structlog


class StructlogSubjectObserver:
    """Delegates subject domain events to structlog.

    Satisfies the SubjectObserver protocol structurally.
    """

    def __init__(self, symbol: str | None = None) -> None:
        log = structlog.get_logger()
        self._log = log.bind(symbol=symbol) if symbol else log

    def observer_attached(self, observer: str, count: int) -> None:
        self._log.debug("subject.observer_attached", observer=observer, count=count)

    def observer_detached(self, observer: str, count: int) -> None:
        self._log.debug("subject.observer_detached", observer=observer, count=count)

    def value_changed(self, value: float, observer_count: int) -> None:
        self._log.info(
            "subject.value_changed", value=value, observer_count=observer_count
        )

    def listener_failed(self, observer: str, value: float, reason: str) -> None:
        self._log.error(
            "subject.listener_failed",
            observer=observer,
            value=value,
            reason=reason,
        )

    def notification_pass_completed(
        self, value: float, notified: int, failed: int
    ) -> None:
        self._log.info(
            "subject.notification_pass_completed",
            value=value,
            notified=notified,
            failed=failed,
        )
