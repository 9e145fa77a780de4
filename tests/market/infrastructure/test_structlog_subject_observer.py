"""Tests for StructlogSubjectObserver."""

import pytest
from structlog.testing import capture_logs

from stock_notify.market.domain.errors import NotificationError
from stock_notify.market.domain.subject import Subject
from stock_notify.market.infrastructure.observer import StructlogSubjectObserver
from tests.market.fake_listeners import FailingListener, RecordingListener


class TestStructlogSubjectObserver:
    def test_value_changed_is_logged_at_info(self) -> None:
        with capture_logs() as logs:
            StructlogSubjectObserver().value_changed(value=3.0, observer_count=2)

        assert logs == [
            {
                "event": "subject.value_changed",
                "value": 3.0,
                "observer_count": 2,
                "log_level": "info",
            }
        ]

    def test_listener_failed_is_logged_at_error(self) -> None:
        with capture_logs() as logs:
            StructlogSubjectObserver().listener_failed(
                observer="Bob", value=1.0, reason="boom"
            )

        assert logs[0]["event"] == "subject.listener_failed"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["reason"] == "boom"

    def test_symbol_is_bound_to_every_event(self) -> None:
        with capture_logs() as logs:
            observer = StructlogSubjectObserver(symbol="ACME")
            observer.observer_attached(observer="Alice", count=1)
            observer.notification_pass_completed(value=2.0, notified=1, failed=0)

        assert [entry["symbol"] for entry in logs] == ["ACME", "ACME"]
        assert logs[0]["log_level"] == "debug"

    def test_full_pass_through_subject(self) -> None:
        calls: list[tuple[str, float]] = []
        with capture_logs() as logs:
            subject = Subject(events=StructlogSubjectObserver())
            subject.attach(RecordingListener(name="a", calls=calls))
            subject.attach(FailingListener(name="b"))
            with pytest.raises(NotificationError):
                subject.set_value(9.0)

        assert [entry["event"] for entry in logs] == [
            "subject.observer_attached",
            "subject.observer_attached",
            "subject.value_changed",
            "subject.listener_failed",
            "subject.notification_pass_completed",
        ]
