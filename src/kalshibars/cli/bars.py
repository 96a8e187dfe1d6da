"""Bars subcommand: convert a candlesticks response file to bars."""

from __future__ import annotations

import json
from pathlib import Path

import structlog
import typer

from kalshibars.ingestion.kalshi.normalize import parse_candlesticks_response
from kalshibars.models.resolution import parse_resolution
from kalshibars.pipeline import convert_candlesticks, no_symbol_for

app = typer.Typer(help="Candlestick to bar conversion")

log = structlog.get_logger(__name__)


@app.command("convert")
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Candlesticks JSON response"),
    ticker: str = typer.Option(..., "--ticker", "-t", help="Market ticker (YES symbol)"),
    resolution: str | None = typer.Option(
        None, "--resolution", "-r", help="minute, hour or daily (default from config)"
    ),
    yes_only: bool = typer.Option(False, "--yes-only", help="Skip NO quote bars even if enabled in config"),
) -> None:
    """Print YES (and NO) quote bars and trade bars as JSON lines."""
    settings = ctx.obj["settings"]
    try:
        res = parse_resolution(resolution) if resolution else settings.resolution
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--resolution") from e
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"not valid JSON ({e})", param_hint="PATH") from e

    candles = parse_candlesticks_response(payload)
    emit_no = settings.emit_no_side and not yes_only
    result = convert_candlesticks(
        candles,
        yes_symbol=ticker,
        period=res.period,
        no_symbol=no_symbol_for(ticker) if emit_no else None,
        zone=settings.exchange_timezone,
    )
    for kind, bars in (("quote", result.yes_quotes), ("quote", result.no_quotes), ("trade", result.trades)):
        for bar in bars:
            typer.echo(json.dumps({"type": kind, **bar.model_dump(mode="json")}))
    log.info(
        "bars_converted",
        ticker=ticker,
        resolution=res.value,
        candles=len(candles),
        yes_quotes=len(result.yes_quotes),
        no_quotes=len(result.no_quotes),
        trades=len(result.trades),
    )
