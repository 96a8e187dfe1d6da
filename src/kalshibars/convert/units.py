"""Unit conversions: cents <-> decimal probability, unix seconds <-> datetimes."""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from zoneinfo import ZoneInfo

# Kalshi lists and settles on US Eastern time
KALSHI_TIMEZONE = ZoneInfo("America/New_York")

_ONE = Decimal(1)
_HUNDRED = Decimal(100)


def cents_to_decimal(cents: int | None) -> Decimal:
    """Cents (0-100) to probability (0.00-1.00). None counts as 0."""
    return Decimal(cents or 0) / _HUNDRED


def complement(value: Decimal) -> Decimal:
    """Price of the opposite token: 1 - value."""
    return _ONE - value


def unix_seconds_to_datetime(seconds: int, zone: tzinfo | None = None) -> datetime:
    """Unix seconds to local time in `zone` (aware), or naive UTC when no zone is given."""
    utc = datetime.fromtimestamp(seconds, tz=timezone.utc)
    if zone is None:
        return utc.replace(tzinfo=None)
    return utc.astimezone(zone)


def to_unix_seconds(dt: datetime, zone: tzinfo | None = None) -> int:
    """Datetime to unix seconds. Naive values are read in `zone`, or as UTC when no zone is given."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=zone or timezone.utc)
    return math.floor(dt.timestamp())
