"""Shared candlestick fixtures."""

import pytest

from kalshibars.models.candlestick import CandlePrice, Candlestick, OHLCCents

# 2025-01-01 14:00 UTC = 09:00 EST
END_TS_WINTER = 1735740000


@pytest.fixture
def candle() -> Candlestick:
    return Candlestick(
        end_period_ts=END_TS_WINTER,
        yes_bid=OHLCCents(open=40, high=44, low=38, close=42),
        yes_ask=OHLCCents(open=43, high=47, low=41, close=45),
        price=CandlePrice(open=42, high=46, low=40, close=44),
        volume=25,
    )


@pytest.fixture
def sample_response() -> dict:
    """Candlesticks response body as returned by the Kalshi API."""
    return {
        "ticker": "KXHIGHNY-25JAN01-B40",
        "candlesticks": [
            {
                "end_period_ts": 1735740060,
                "open_interest": 310,
                "price": {"open": None, "high": None, "low": None, "close": None, "previous": 44},
                "volume": 0,
                "yes_bid": {"open": 42, "high": 43, "low": 41, "close": 43},
                "yes_ask": {"open": 45, "high": 46, "low": 44, "close": 44},
            },
            {
                "end_period_ts": 1735740000,
                "open_interest": 300,
                "price": {"open": 42, "high": 46, "low": 40, "close": 44, "mean": 43, "previous": 41},
                "volume": 25,
                "yes_bid": {"open": 40, "high": 44, "low": 38, "close": 42},
                "yes_ask": {"open": 43, "high": 47, "low": 41, "close": 45},
            },
        ],
    }
