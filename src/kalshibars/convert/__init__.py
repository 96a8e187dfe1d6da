"""Candlestick -> bar conversion: units, YES bars, NO complement bars, request date ranges."""

from kalshibars.convert.bars import period_bounds, to_bar, to_quote_bar, to_trade_bar
from kalshibars.convert.complement import complement_bar, to_no_quote_bar
from kalshibars.convert.ranges import DateRanges, generate_date_ranges
from kalshibars.convert.units import (
    KALSHI_TIMEZONE,
    cents_to_decimal,
    complement,
    to_unix_seconds,
    unix_seconds_to_datetime,
)

__all__ = [
    "KALSHI_TIMEZONE",
    "cents_to_decimal",
    "complement",
    "unix_seconds_to_datetime",
    "to_unix_seconds",
    "period_bounds",
    "to_bar",
    "to_quote_bar",
    "to_trade_bar",
    "complement_bar",
    "to_no_quote_bar",
    "DateRanges",
    "generate_date_ranges",
]
