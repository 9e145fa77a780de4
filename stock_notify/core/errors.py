"""Root of the stock-notify exception hierarchy."""


class StockNotifyError(Exception):
    """Base class for every error raised by stock-notify.

    Nothing here is retried: notification is best-effort once, so callers
    only need to tell project errors apart from unexpected ones.
    """
