"""Batch conversion of a candlestick series into YES/NO quote bars and trade bars."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta, tzinfo
from typing import Iterable

import structlog

from kalshibars.convert.bars import to_quote_bar, to_trade_bar
from kalshibars.convert.complement import to_no_quote_bar
from kalshibars.convert.units import KALSHI_TIMEZONE
from kalshibars.models.bars import QuoteBar, TradeBar
from kalshibars.models.candlestick import Candlestick

log = structlog.get_logger(__name__)


def no_symbol_for(ticker: str) -> str:
    """Symbol used for the NO side of a market ticker."""
    return f"{ticker}-NO"


@dataclass
class ConvertedBars:
    """Bars produced from one candlestick series, each list ordered by bar time."""

    yes_quotes: list[QuoteBar] = field(default_factory=list)
    no_quotes: list[QuoteBar] = field(default_factory=list)
    trades: list[TradeBar] = field(default_factory=list)


def convert_candlesticks(
    candles: Iterable[Candlestick],
    yes_symbol: str,
    period: timedelta,
    no_symbol: str | None = None,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> ConvertedBars:
    """Convert candles to bars. Duplicate end_period_ts keep the last candle seen.

    NO quote bars are only built when `no_symbol` is given.
    """
    by_end: dict[int, Candlestick] = {}
    total = 0
    for candle in candles:
        by_end[candle.end_period_ts] = candle
        total += 1
    result = ConvertedBars()
    for end_ts in sorted(by_end):
        candle = by_end[end_ts]
        result.yes_quotes.append(to_quote_bar(candle, yes_symbol, period, zone))
        if no_symbol is not None:
            result.no_quotes.append(to_no_quote_bar(candle, no_symbol, period, zone))
        trade = to_trade_bar(candle, yes_symbol, period, zone)
        if trade is not None:
            result.trades.append(trade)
    log.debug(
        "candlesticks_converted",
        symbol=yes_symbol,
        candles=total,
        duplicates=total - len(by_end),
        quotes=len(result.yes_quotes),
        trades=len(result.trades),
    )
    return result
