"""Ranges subcommand: plan chunked candlestick requests."""

from __future__ import annotations

from datetime import datetime

import typer

from kalshibars.ingestion.kalshi.requests import plan_candlestick_requests
from kalshibars.models.resolution import parse_resolution

app = typer.Typer(help="Chunked request planning")


@app.command("plan")
def plan(
    ctx: typer.Context,
    series: str = typer.Argument(..., help="Series ticker"),
    ticker: str = typer.Argument(..., help="Market ticker"),
    start: datetime = typer.Argument(..., help="Start (exchange-local unless an offset is given)"),
    end: datetime = typer.Argument(..., help="End (exclusive)"),
    resolution: str | None = typer.Option(None, "--resolution", "-r", help="minute, hour or daily"),
    interval_days: int | None = typer.Option(
        None, "--interval-days", "-i", min=1, help="Days per request (default from config)"
    ),
) -> None:
    """List the candlestick requests covering [start, end)."""
    settings = ctx.obj["settings"]
    try:
        res = parse_resolution(resolution) if resolution else settings.resolution
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--resolution") from e
    if interval_days is None:
        interval_days = settings.chunk_interval_days if resolution is None else res.default_chunk_days
    requests = plan_candlestick_requests(
        series,
        ticker,
        start,
        end,
        resolution=res,
        interval_days=interval_days,
        zone=settings.exchange_timezone,
    )
    for req in requests:
        typer.echo(f"{req.path}  start_ts={req.start_ts}  end_ts={req.end_ts}  period_interval={req.period_interval}")
    typer.echo(f"{len(requests)} request(s)")
