"""Candlestick, OHLCCents, CandlePrice - Kalshi candlestick as reported (cents)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OHLCCents(BaseModel):
    """Bid or ask OHLC in integer cents. Range is trusted from upstream, not checked."""

    model_config = ConfigDict(frozen=True)

    open: int
    high: int
    low: int
    close: int


class CandlePrice(BaseModel):
    """Last-trade OHLC in cents. Fields are null when nothing traded in the period."""

    model_config = ConfigDict(frozen=True)

    open: int | None = None
    high: int | None = None
    low: int | None = None
    close: int | None = None

    @property
    def is_valid(self) -> bool:
        return None not in (self.open, self.high, self.low, self.close)


class Candlestick(BaseModel):
    """One Kalshi market candlestick for the YES token."""

    model_config = ConfigDict(frozen=True)

    end_period_ts: int  # unix seconds, end of the period
    yes_bid: OHLCCents | None = None
    yes_ask: OHLCCents | None = None
    price: CandlePrice | None = None
    volume: int = 0
    open_interest: int | None = None
