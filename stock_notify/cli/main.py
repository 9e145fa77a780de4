"""CLI entrypoint for stock-notify: typer app with a `run` command."""

import sys
from pathlib import Path

import structlog
import typer

from stock_notify.config.domain.config import WatchlistConfig
from stock_notify.config.infrastructure.observer import StructlogConfigObserver
from stock_notify.config.infrastructure.yaml_loader import YamlConfigLoader
from stock_notify.core.errors import StockNotifyError
from stock_notify.market.domain.errors import NotificationError
from stock_notify.market.domain.subject import Subject
from stock_notify.market.infrastructure.observer import StructlogSubjectObserver
from stock_notify.market.infrastructure.stock_user import StockUser, format_price

app = typer.Typer(add_completion=False)

_RENDERERS: dict[str, list[structlog.types.Processor]] = {
    "console": [structlog.dev.ConsoleRenderer()],
    "json": [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
}


@app.callback()
def main() -> None:
    """Replay stock price feeds to named listeners."""


def _configure_structlog(log_format: str) -> None:
    """Route every StockUser line and subject event through one renderer."""
    tail = _RENDERERS.get(log_format)
    if tail is None:
        choices = " or ".join(repr(name) for name in _RENDERERS)
        typer.echo(f"Invalid log format: {log_format!r}. Must be {choices}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *tail,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def build_subject(config: WatchlistConfig) -> Subject:
    """Create the Subject for *config* with one StockUser attached per user."""
    subject = Subject(
        events=StructlogSubjectObserver(symbol=config.symbol),
        failure_policy=config.failure_policy,
        initial_value=config.initial_price,
    )
    for name in config.users:
        subject.attach(StockUser(name))
    return subject


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to watchlist config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Replay the configured price feed through a Subject."""
    try:
        _configure_structlog(log_format=log_format)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)
        subject = build_subject(config)

        failed_passes = 0
        for price in config.prices:
            try:
                subject.set_value(price)
            except NotificationError as exc:
                typer.echo(str(exc))
                failed_passes += 1

        final_price = format_price(subject.current_value)
        typer.echo(
            f"{config.symbol}: {len(config.prices)} update(s) delivered to "
            f"{len(subject)} listener(s), final price ${final_price}"
        )
        if failed_passes:
            sys.exit(1)

    except KeyboardInterrupt:
        typer.echo("Replay interrupted.")
        sys.exit(1)
    except StockNotifyError as exc:
        typer.echo(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    app()
