"""Kalshi candlesticks API payload -> canonical Candlestick."""

from __future__ import annotations

from typing import Any

import structlog

from kalshibars.models.candlestick import CandlePrice, Candlestick, OHLCCents

log = structlog.get_logger(__name__)

_OHLC_KEYS = ("open", "high", "low", "close")


def _int(s: Any) -> int | None:
    if s is None or isinstance(s, bool):
        return None
    if isinstance(s, float) and not s.is_integer():
        return None
    try:
        return int(s)
    except (TypeError, ValueError):
        return None


def parse_ohlc(raw: Any) -> OHLCCents | None:
    """yes_bid / yes_ask object -> OHLCCents. None if missing or any field is null."""
    if not isinstance(raw, dict):
        return None
    values = [_int(raw.get(k)) for k in _OHLC_KEYS]
    if None in values:
        return None
    o, h, lo, c = values
    return OHLCCents(open=o, high=h, low=lo, close=c)


def parse_price(raw: Any) -> CandlePrice | None:
    """price object -> CandlePrice (fields may be null when no trade printed)."""
    if not isinstance(raw, dict):
        return None
    return CandlePrice(**{k: _int(raw.get(k)) for k in _OHLC_KEYS})


def parse_candlestick(payload: dict[str, Any]) -> Candlestick | None:
    """Convert one entry of the candlesticks response to Candlestick. None without end_period_ts."""
    end_ts = _int(payload.get("end_period_ts"))
    if end_ts is None:
        log.debug("candlestick_skipped", reason="missing end_period_ts")
        return None
    return Candlestick(
        end_period_ts=end_ts,
        yes_bid=parse_ohlc(payload.get("yes_bid")),
        yes_ask=parse_ohlc(payload.get("yes_ask")),
        price=parse_price(payload.get("price")),
        volume=_int(payload.get("volume")) or 0,
        open_interest=_int(payload.get("open_interest")),
    )


def parse_candlesticks_response(payload: dict[str, Any] | list[Any]) -> list[Candlestick]:
    """Parse {"candlesticks": [...]} (or a bare list) into Candlesticks sorted by end_period_ts."""
    entries = payload.get("candlesticks") if isinstance(payload, dict) else payload
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        log.debug("candlesticks_not_a_list", kind=type(entries).__name__)
        return []
    out = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        candle = parse_candlestick(entry)
        if candle is not None:
            out.append(candle)
    skipped = len(entries) - len(out)
    if skipped:
        log.debug("candlesticks_skipped", count=skipped, total=len(entries))
    out.sort(key=lambda c: c.end_period_ts)
    return out
