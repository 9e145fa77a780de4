"""Error types raised while loading a watchlist file."""

from pathlib import Path

from stock_notify.core.errors import StockNotifyError


class ConfigError(StockNotifyError):
    """A watchlist file could not be turned into a WatchlistConfig."""

    def __init__(self, path: Path, problem: str) -> None:
        self.path = path
        self.problem = problem
        super().__init__(f"Failed to load watchlist {path}: {problem}")


class ConfigLoadError(ConfigError):
    """The watchlist file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "file not found")


class MissingEnvVarsError(ConfigError):
    """The watchlist references ${ENV_VAR}s that are not set."""

    def __init__(self, path: Path, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            path, f"missing environment variables: {', '.join(missing_vars)}"
        )


class ConfigValidationError(ConfigError):
    """The watchlist is not valid YAML or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"invalid watchlist: {reason}")
