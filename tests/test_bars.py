"""YES quote bar and trade bar construction."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from kalshibars.convert.bars import period_bounds, to_quote_bar, to_trade_bar
from kalshibars.convert.units import KALSHI_TIMEZONE, to_unix_seconds, unix_seconds_to_datetime
from kalshibars.models.bars import Bar
from kalshibars.models.candlestick import CandlePrice

MINUTE = timedelta(minutes=1)


def test_quote_bar_sides_in_decimal(candle):
    qb = to_quote_bar(candle, "T", MINUTE)
    assert qb.symbol == "T"
    assert qb.bid == Bar(open=Decimal("0.40"), high=Decimal("0.44"), low=Decimal("0.38"), close=Decimal("0.42"))
    assert qb.ask == Bar(open=Decimal("0.43"), high=Decimal("0.47"), low=Decimal("0.41"), close=Decimal("0.45"))
    assert qb.last_bid_size == 25
    assert qb.last_ask_size == 25


def test_quote_bar_period_framing(candle):
    qb = to_quote_bar(candle, "T", MINUTE)
    end_time = unix_seconds_to_datetime(candle.end_period_ts, KALSHI_TIMEZONE)
    assert qb.end_time == end_time
    assert qb.time == end_time - MINUTE
    assert qb.time == datetime(2025, 1, 1, 8, 59, tzinfo=KALSHI_TIMEZONE)
    assert qb.period == MINUTE


def test_period_bounds_hour(candle):
    start, end = period_bounds(candle, timedelta(hours=1))
    assert end == datetime(2025, 1, 1, 9, 0, tzinfo=KALSHI_TIMEZONE)
    assert start == datetime(2025, 1, 1, 8, 0, tzinfo=KALSHI_TIMEZONE)


def test_missing_bid_is_omitted_not_zero_filled(candle):
    qb = to_quote_bar(candle.model_copy(update={"yes_bid": None}), "T", MINUTE)
    assert qb.bid is None
    assert qb.last_bid_size == 0
    assert qb.ask is not None


def test_missing_both_sides(candle):
    qb = to_quote_bar(candle.model_copy(update={"yes_bid": None, "yes_ask": None}), "T", MINUTE)
    assert qb.bid is None and qb.ask is None
    assert qb.end_time == unix_seconds_to_datetime(candle.end_period_ts, KALSHI_TIMEZONE)


def test_trade_bar_from_valid_price(candle):
    tb = to_trade_bar(candle, "T", MINUTE)
    assert tb is not None
    assert (tb.open, tb.high, tb.low, tb.close) == (
        Decimal("0.42"),
        Decimal("0.46"),
        Decimal("0.40"),
        Decimal("0.44"),
    )
    assert tb.volume == 25
    assert tb.time == datetime(2025, 1, 1, 8, 59, tzinfo=KALSHI_TIMEZONE)


def test_trade_bar_none_when_price_invalid(candle):
    invalid = candle.model_copy(update={"price": CandlePrice(open=None, high=None, low=None, close=None)})
    assert to_trade_bar(invalid, "T", MINUTE) is None
    partial = candle.model_copy(update={"price": CandlePrice(open=42, high=46, low=40, close=None)})
    assert to_trade_bar(partial, "T", MINUTE) is None


def test_trade_bar_none_when_price_absent(candle):
    assert to_trade_bar(candle.model_copy(update={"price": None}), "T", MINUTE) is None


def test_each_call_builds_fresh_equal_bars(candle):
    a = to_quote_bar(candle, "T", MINUTE)
    b = to_quote_bar(candle, "T", MINUTE)
    assert a == b
    assert a is not b


@pytest.mark.parametrize(
    "end_ts,period",
    [
        (1762059660, MINUTE),  # 2025-11-02 01:01 EDT
        (1762063260, MINUTE),  # 2025-11-02 01:01 EST, repeated hour
        (1762063200, timedelta(hours=1)),  # 01:00 EST, starts at 01:00 EDT
        (1741503600, MINUTE),  # 2025-03-09 03:00 EDT, just after spring forward
        (1741579200, timedelta(days=1)),  # 2025-03-10 00:00 EDT, spans the gap
        (1762146000, timedelta(days=1)),  # 2025-11-03 00:00 EST, spans the repeat
    ],
)
def test_framing_across_dst(candle, end_ts, period):
    c = candle.model_copy(update={"end_period_ts": end_ts})
    end = unix_seconds_to_datetime(end_ts, KALSHI_TIMEZONE)
    qb = to_quote_bar(c, "T", period)
    tb = to_trade_bar(c, "T", period)
    for bar in (qb, tb):
        assert to_unix_seconds(bar.end_time) == end_ts
        assert to_unix_seconds(bar.time) == end_ts - int(period.total_seconds())
        assert bar.end_time.utcoffset() == end.utcoffset()


def test_repeated_hour_bars_are_distinct(candle):
    edt = to_quote_bar(candle.model_copy(update={"end_period_ts": 1762059660}), "T", MINUTE)
    est = to_quote_bar(candle.model_copy(update={"end_period_ts": 1762063260}), "T", MINUTE)
    assert edt.model_dump(mode="json")["time"] == "2025-11-02T01:00:00-04:00"
    assert est.model_dump(mode="json")["time"] == "2025-11-02T01:00:00-05:00"
    assert edt.time.utcoffset() == timedelta(hours=-4)
    assert est.time.utcoffset() == timedelta(hours=-5)


def test_daily_bar_over_spring_forward_starts_previous_evening(candle):
    qb = to_quote_bar(candle.model_copy(update={"end_period_ts": 1741579200}), "T", timedelta(days=1))
    assert qb.end_time.utcoffset() == timedelta(hours=-4)
    assert (qb.time.month, qb.time.day, qb.time.hour) == (3, 8, 23)
    assert qb.time.utcoffset() == timedelta(hours=-5)
