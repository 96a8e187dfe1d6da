"""Canonical schema (Pydantic) - Candlestick input, QuoteBar/TradeBar output."""

from kalshibars.models.bars import Bar, QuoteBar, TradeBar
from kalshibars.models.candlestick import CandlePrice, Candlestick, OHLCCents
from kalshibars.models.resolution import Resolution, parse_resolution

__all__ = [
    "Candlestick",
    "OHLCCents",
    "CandlePrice",
    "Bar",
    "QuoteBar",
    "TradeBar",
    "Resolution",
    "parse_resolution",
]
