"""StockUser: a named listener that logs one line per price update."""

import math

import structlog

from stock_notify.market.domain.sink import NotificationSink


def format_price(price: float) -> str:
    """Render *price* for the notification line.

    Finite values use Python's float repr; NaN and the infinities are spelled
    ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if math.isnan(price):
        return "NaN"
    if math.isinf(price):
        return "Infinity" if price > 0 else "-Infinity"
    return str(price)


class StockUser:
    """Logs ``"<name> notified. New stock price: $<value>"`` on every update.

    Satisfies the PriceObserver protocol structurally. The sink defaults to a
    structlog logger named after this class; tests inject a recording sink.
    """

    def __init__(self, name: str, sink: NotificationSink | None = None) -> None:
        self._name = name
        self._sink: NotificationSink = (
            sink if sink is not None else structlog.get_logger(type(self).__name__)
        )

    @property
    def name(self) -> str:
        return self._name

    def update(self, new_value: float) -> None:
        price = float(new_value)
        self._sink.info(
            f"{self._name} notified. New stock price: ${format_price(price)}",
            listener=self._name,
            price=price,
        )

    def __repr__(self) -> str:
        return f"StockUser(name={self._name!r})"
