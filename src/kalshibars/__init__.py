"""kalshibars - Kalshi candlesticks to decimal YES/NO quote and trade bars."""

__version__ = "0.1.0"
