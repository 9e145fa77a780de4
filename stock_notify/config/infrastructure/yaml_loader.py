"""YAML watchlist loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stock_notify.config.domain.config import WatchlistConfig
from stock_notify.config.domain.observer import ConfigObserver
from stock_notify.config.infrastructure.env_interpolation import (
    find_missing_vars,
    substitute,
)
from stock_notify.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads and validates a WatchlistConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> WatchlistConfig:
        """
        Load, interpolate, validate, and return a WatchlistConfig.

        Raises:
            ConfigLoadError: if *path* does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not valid YAML or violates the schema.
        """
        raw = _parse_yaml(path=path)
        missing = find_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(path, missing)
        cfg = _build_config(path=path, raw=substitute(raw))
        if not cfg.prices:
            self._observer.config_empty_feed_warning(symbol=cfg.symbol)
        self._observer.config_loaded(symbol=cfg.symbol, users=len(cfg.users))
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(path, f"not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError(path, "top level must be a mapping")
    return raw


def _build_config(path: Path, raw: Any) -> WatchlistConfig:
    try:
        return WatchlistConfig.model_validate(raw)
    except ValidationError as exc:
        fields = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigValidationError(path, fields) from exc
