"""Split a candlestick history query into bounded Kalshi requests (no I/O)."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any

from pydantic import BaseModel, ConfigDict

from kalshibars.convert.ranges import generate_date_ranges
from kalshibars.convert.units import KALSHI_TIMEZONE, to_unix_seconds
from kalshibars.models.resolution import Resolution, parse_resolution


class CandlestickRequest(BaseModel):
    """One GET /series/{series}/markets/{ticker}/candlesticks call."""

    model_config = ConfigDict(frozen=True)

    series_ticker: str
    market_ticker: str
    start_ts: int
    end_ts: int
    period_interval: int

    @property
    def path(self) -> str:
        return f"/series/{self.series_ticker}/markets/{self.market_ticker}/candlesticks"

    @property
    def params(self) -> dict[str, Any]:
        return {
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "period_interval": self.period_interval,
        }


def plan_candlestick_requests(
    series_ticker: str,
    market_ticker: str,
    start: datetime,
    end: datetime,
    resolution: Resolution | str = Resolution.MINUTE,
    interval_days: int | None = None,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> list[CandlestickRequest]:
    """One request per date window; naive start/end are read in `zone`."""
    res = parse_resolution(resolution)
    days = interval_days if interval_days is not None else res.default_chunk_days
    return [
        CandlestickRequest(
            series_ticker=series_ticker,
            market_ticker=market_ticker,
            start_ts=to_unix_seconds(window_start, zone),
            end_ts=to_unix_seconds(window_end, zone),
            period_interval=res.period_interval,
        )
        for window_start, window_end in generate_date_ranges(start, end, days)
    ]
