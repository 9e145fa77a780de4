"""WatchlistConfig: the root configuration object for a price replay."""

from pydantic import BaseModel, Field

from stock_notify.market.domain.policy import FailurePolicy

type UserName = str


class WatchlistConfig(BaseModel, frozen=True):
    """One watched symbol, the users listening to it, and the feed to replay."""

    symbol: str = Field(min_length=1)
    initial_price: float = 0.0
    failure_policy: FailurePolicy = FailurePolicy.ISOLATE
    users: list[UserName] = Field(min_length=1)
    prices: list[float] = Field(default_factory=list)
