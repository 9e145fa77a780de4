"""PriceObserver port: anything that wants to hear about a new price."""

from typing import Protocol


class PriceObserver(Protocol):
    """Receives the new value pushed by a Subject.

    Implementations may log, record for tests, or forward elsewhere. Any
    exception raised from ``update`` is handled by the Subject's failure policy.
    """

    def update(self, new_value: float) -> None: ...
