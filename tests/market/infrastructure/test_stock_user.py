"""Tests for StockUser: the named, logging PriceObserver."""

import pytest
from structlog.testing import capture_logs

from stock_notify.market.infrastructure.stock_user import StockUser
from tests.market.fake_listeners import BrokenSink, RecordingSink


class TestStockUserMessage:
    def test_emits_one_line_per_update(self) -> None:
        sink = RecordingSink()
        user = StockUser("Alice", sink=sink)

        user.update(101.5)

        assert sink.lines == ["Alice notified. New stock price: $101.5"]

    def test_repeated_values_are_not_deduplicated(self) -> None:
        sink = RecordingSink()
        user = StockUser("Alice", sink=sink)

        user.update(5.0)
        user.update(5.0)

        assert len(sink.lines) == 2

    def test_integer_value_rendered_as_float(self) -> None:
        sink = RecordingSink()
        StockUser("Bob", sink=sink).update(100)  # type: ignore[arg-type]
        assert sink.lines == ["Bob notified. New stock price: $100.0"]

    def test_structured_fields_carry_name_and_price(self) -> None:
        sink = RecordingSink()
        StockUser("Carol", sink=sink).update(12.25)
        assert sink.fields == [{"listener": "Carol", "price": 12.25}]

    def test_empty_name_is_allowed(self) -> None:
        sink = RecordingSink()
        StockUser("", sink=sink).update(1.5)
        assert sink.lines == [" notified. New stock price: $1.5"]


class TestStockUserIdentity:
    def test_name_property(self) -> None:
        assert StockUser("Dave", sink=RecordingSink()).name == "Dave"

    def test_repr_includes_name(self) -> None:
        assert repr(StockUser("Eve", sink=RecordingSink())) == "StockUser(name='Eve')"


class TestStockUserDefaultSink:
    def test_logs_through_structlog_when_no_sink_injected(self) -> None:
        user = StockUser("Alice")
        with capture_logs() as logs:
            user.update(101.5)

        assert logs == [
            {
                "event": "Alice notified. New stock price: $101.5",
                "listener": "Alice",
                "price": 101.5,
                "log_level": "info",
            }
        ]


class TestStockUserSinkFailure:
    def test_sink_error_propagates(self) -> None:
        user = StockUser("Alice", sink=BrokenSink())
        with pytest.raises(OSError, match="log backend unavailable"):
            user.update(1.0)


class TestStockUserNonFiniteValues:
    @pytest.mark.parametrize(
        ("value", "rendered"),
        [
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_non_finite_prices_spelled_out(self, value: float, rendered: str) -> None:
        sink = RecordingSink()
        StockUser("Alice", sink=sink).update(value)
        assert sink.lines == [f"Alice notified. New stock price: ${rendered}"]

    def test_negative_price_uses_plain_repr(self) -> None:
        sink = RecordingSink()
        StockUser("Alice", sink=sink).update(-2.5)
        assert sink.lines == ["Alice notified. New stock price: $-2.5"]
