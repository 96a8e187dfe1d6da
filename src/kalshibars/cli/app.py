"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from kalshibars.config import get_settings
from kalshibars.config.settings import configure_logging

app = typer.Typer(
    name="kalshibars",
    help="kalshibars - Kalshi candlesticks to YES/NO quote and trade bars.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {"settings": settings, "config_dir": config_dir, "profile": profile}


# Subcommands registered from other modules
from kalshibars.cli import bars, ranges  # noqa: E402

app.add_typer(bars.app, name="bars")
app.add_typer(ranges.app, name="ranges")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
