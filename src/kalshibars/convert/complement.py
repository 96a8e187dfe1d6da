"""NO-token quote bar derived from the YES candlestick.

In a binary market NO = 1 - YES, so:

    NO bid = 1 - YES ask   (selling NO mirrors buying YES)
    NO ask = 1 - YES bid

x -> 1 - x is decreasing, so the extremes swap: the NO high comes from the
YES low and the NO low from the YES high.
"""

from __future__ import annotations

from datetime import timedelta, tzinfo

from kalshibars.convert.bars import period_bounds, to_bar
from kalshibars.convert.units import KALSHI_TIMEZONE, complement
from kalshibars.models.bars import Bar, QuoteBar
from kalshibars.models.candlestick import Candlestick


def complement_bar(bar: Bar) -> Bar:
    """Bar of the opposite token, with high/low swapped."""
    return Bar(
        open=complement(bar.open),
        high=complement(bar.low),
        low=complement(bar.high),
        close=complement(bar.close),
    )


def to_no_quote_bar(
    candle: Candlestick,
    no_symbol: str,
    period: timedelta,
    zone: tzinfo = KALSHI_TIMEZONE,
) -> QuoteBar:
    """NO quote bar from the same candlestick; a side is None when its YES source side is."""
    start_time, _ = period_bounds(candle, period, zone)
    bid = ask = None
    bid_size = ask_size = 0
    if candle.yes_ask is not None:
        bid = complement_bar(to_bar(candle.yes_ask))
        bid_size = candle.volume
    if candle.yes_bid is not None:
        ask = complement_bar(to_bar(candle.yes_bid))
        ask_size = candle.volume
    return QuoteBar(
        symbol=no_symbol,
        time=start_time,
        period=period,
        bid=bid,
        ask=ask,
        last_bid_size=bid_size,
        last_ask_size=ask_size,
    )
