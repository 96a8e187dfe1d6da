"""Kalshi candlesticks payloads: parsing and request planning."""

from kalshibars.ingestion.kalshi.normalize import parse_candlestick, parse_candlesticks_response
from kalshibars.ingestion.kalshi.requests import CandlestickRequest, plan_candlestick_requests

__all__ = [
    "parse_candlestick",
    "parse_candlesticks_response",
    "CandlestickRequest",
    "plan_candlestick_requests",
]
