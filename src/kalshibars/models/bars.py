"""Bar, QuoteBar, TradeBar - normalized price bars in decimal probability."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


def _elapsed_end(start: datetime, period: timedelta) -> datetime:
    """start + period in elapsed time, expressed in the zone of `start`."""
    if start.tzinfo is None:
        return start + period
    return (start.astimezone(timezone.utc) + period).astimezone(start.tzinfo)


class Bar(BaseModel):
    """Decimal OHLC, one side of a quote bar."""

    model_config = ConfigDict(frozen=True)

    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal


class QuoteBar(BaseModel):
    """Two-sided quote bar over [time, time + period). Either side may be absent."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    time: datetime  # period start, exchange-local
    period: timedelta
    bid: Bar | None = None
    ask: Bar | None = None
    last_bid_size: int = 0
    last_ask_size: int = 0

    @property
    def end_time(self) -> datetime:
        return _elapsed_end(self.time, self.period)


class TradeBar(BaseModel):
    """Last-trade OHLC bar with traded volume."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    time: datetime
    period: timedelta
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int = 0

    @property
    def end_time(self) -> datetime:
        return _elapsed_end(self.time, self.period)
