"""Resolution - bar period and the matching Kalshi candlestick period_interval."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum


class Resolution(str, Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAILY = "daily"

    @property
    def period_interval(self) -> int:
        """Kalshi candlesticks period_interval, in minutes."""
        return _PERIOD_INTERVAL[self]

    @property
    def period(self) -> timedelta:
        return timedelta(minutes=self.period_interval)

    @property
    def default_chunk_days(self) -> int:
        """Days per request so a single candlesticks call stays bounded."""
        return _CHUNK_DAYS[self]


_PERIOD_INTERVAL = {
    Resolution.MINUTE: 1,
    Resolution.HOUR: 60,
    Resolution.DAILY: 1440,
}

_CHUNK_DAYS = {
    Resolution.MINUTE: 3,
    Resolution.HOUR: 30,
    Resolution.DAILY: 365,
}

_ALIASES = {
    "1m": Resolution.MINUTE,
    "1min": Resolution.MINUTE,
    "1h": Resolution.HOUR,
    "60m": Resolution.HOUR,
    "1d": Resolution.DAILY,
    "day": Resolution.DAILY,
}


def parse_resolution(value: str | Resolution) -> Resolution:
    """Resolution from its name or a short alias (1m, 1h, 1d). Raises ValueError if unknown."""
    if isinstance(value, Resolution):
        return value
    key = (value or "").strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Resolution(key)
    except ValueError:
        raise ValueError(f"Unknown resolution: {value!r}") from None
