"""Candlestick -> YES QuoteBar / TradeBar, framed on the candlestick end timestamp."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from kalshibars.convert.units import KALSHI_TIMEZONE, cents_to_decimal, unix_seconds_to_datetime
from kalshibars.models.bars import Bar, QuoteBar, TradeBar
from kalshibars.models.candlestick import Candlestick, OHLCCents


def period_bounds(
    candle: Candlestick,
    period: timedelta,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> tuple[datetime, datetime]:
    """(start, end) of the bar period; end is the reported end_period_ts in `zone`.

    The period is subtracted in UTC so the start keeps the right offset
    around DST changes (the repeated fall-back hour in particular).
    """
    end_time = unix_seconds_to_datetime(candle.end_period_ts, zone)
    start_time = (end_time.astimezone(timezone.utc) - period).astimezone(zone)
    return start_time, end_time


def to_bar(ohlc: OHLCCents) -> Bar:
    return Bar(
        open=cents_to_decimal(ohlc.open),
        high=cents_to_decimal(ohlc.high),
        low=cents_to_decimal(ohlc.low),
        close=cents_to_decimal(ohlc.close),
    )


def to_quote_bar(
    candle: Candlestick,
    symbol: str,
    period: timedelta,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> QuoteBar:
    """YES quote bar: bid from yes_bid, ask from yes_ask. A missing side stays None."""
    start_time, _ = period_bounds(candle, period, zone)
    bid = ask = None
    bid_size = ask_size = 0
    if candle.yes_bid is not None:
        bid = to_bar(candle.yes_bid)
        bid_size = candle.volume
    if candle.yes_ask is not None:
        ask = to_bar(candle.yes_ask)
        ask_size = candle.volume
    return QuoteBar(
        symbol=symbol,
        time=start_time,
        period=period,
        bid=bid,
        ask=ask,
        last_bid_size=bid_size,
        last_ask_size=ask_size,
    )


def to_trade_bar(
    candle: Candlestick,
    symbol: str,
    period: timedelta,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> TradeBar | None:
    """Trade bar from the last-trade price, or None when nothing traded in the period."""
    price = candle.price
    if price is None or not price.is_valid:
        return None
    start_time, _ = period_bounds(candle, period, zone)
    return TradeBar(
        symbol=symbol,
        time=start_time,
        period=period,
        open=cents_to_decimal(price.open),
        high=cents_to_decimal(price.high),
        low=cents_to_decimal(price.low),
        close=cents_to_decimal(price.close),
        volume=candle.volume,
    )
