"""Subject: holds a price and pushes every change to its attached observers."""

import threading
from collections import deque

from stock_notify.market.domain.errors import (
    InvalidObserverError,
    ListenerFailure,
    NotificationError,
    describe_observer,
)
from stock_notify.market.domain.events import SilentSubjectObserver, SubjectObserver
from stock_notify.market.domain.observer import PriceObserver
from stock_notify.market.domain.policy import FailurePolicy


class Subject:
    """Ordered registry of PriceObservers plus the value they are told about.

    Observers are notified synchronously, in attach order, on the caller's
    thread. Duplicates are allowed: an observer attached twice is notified
    twice per value. A re-entrant lock is held for attach, detach and the
    whole notification pass, and each pass iterates over a snapshot of the
    registry, so changes made from inside update() apply from the next pass.
    A set_value() made from inside update() is queued behind the running pass,
    so every observer sees values in the order they were set.
    """

    def __init__(
        self,
        events: SubjectObserver | None = None,
        failure_policy: FailurePolicy = FailurePolicy.ISOLATE,
        initial_value: float = 0.0,
    ) -> None:
        self._events: SubjectObserver = (
            events if events is not None else SilentSubjectObserver()
        )
        self._failure_policy = FailurePolicy(failure_policy)
        self._observers: list[PriceObserver] = []
        self._current_value = float(initial_value)
        self._lock = threading.RLock()
        self._pending: deque[float] = deque()
        self._dispatching = False

    @property
    def current_value(self) -> float:
        return self._current_value

    @property
    def failure_policy(self) -> FailurePolicy:
        return self._failure_policy

    @property
    def observers(self) -> tuple[PriceObserver, ...]:
        with self._lock:
            return tuple(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def attach(self, observer: PriceObserver) -> None:
        """Append *observer* to the registry.

        Raises:
            InvalidObserverError: if *observer* is None or has no callable update().
        """
        if observer is None or not callable(getattr(observer, "update", None)):
            raise InvalidObserverError(observer)
        with self._lock:
            self._observers.append(observer)
            self._events.observer_attached(
                observer=describe_observer(observer), count=len(self._observers)
            )

    def detach(self, observer: PriceObserver) -> None:
        """Remove the first occurrence of *observer* (by identity). No-op if absent."""
        with self._lock:
            for index, existing in enumerate(self._observers):
                if existing is observer:
                    del self._observers[index]
                    self._events.observer_detached(
                        observer=describe_observer(observer),
                        count=len(self._observers),
                    )
                    return

    def set_value(self, new_value: float) -> None:
        """
        Store *new_value* and notify every attached observer, in order.

        The value is stored before any observer runs, so it is in effect even
        when a listener fails. A call made from inside an observer's update()
        is queued and dispatched, in call order, once the running pass ends.

        Raises:
            ListenerFailure: under FailurePolicy.ABORT, on the first failing
                listener; the remaining listeners are not notified and queued
                values are discarded.
            NotificationError: under FailurePolicy.ISOLATE, after every queued
                pass has run, if one or more listeners failed.
        """
        value = float(new_value)
        with self._lock:
            self._pending.append(value)
            if self._dispatching:
                return
            self._dispatching = True
            failures: list[ListenerFailure] = []
            try:
                while self._pending:
                    failures.extend(self._run_pass(self._pending.popleft()))
            finally:
                self._dispatching = False
                self._pending.clear()
        if failures:
            raise NotificationError(value=value, failures=failures)

    def _run_pass(self, value: float) -> list[ListenerFailure]:
        self._current_value = value
        snapshot = tuple(self._observers)
        self._events.value_changed(value=value, observer_count=len(snapshot))
        failures = self._notify_all(snapshot=snapshot, value=value)
        self._events.notification_pass_completed(
            value=value,
            notified=len(snapshot) - len(failures),
            failed=len(failures),
        )
        return failures

    def _notify_all(
        self, snapshot: tuple[PriceObserver, ...], value: float
    ) -> list[ListenerFailure]:
        failures: list[ListenerFailure] = []
        for observer in snapshot:
            try:
                observer.update(value)
            except Exception as exc:
                failure = ListenerFailure(observer=observer, value=value, cause=exc)
                self._events.listener_failed(
                    observer=describe_observer(observer),
                    value=value,
                    reason=str(exc),
                )
                if self._failure_policy is FailurePolicy.ABORT:
                    raise failure from exc
                failures.append(failure)
        return failures
