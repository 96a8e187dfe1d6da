"""Date windows for splitting long history queries into bounded requests."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, TypeVar

D = TypeVar("D", bound=date)


class DateRanges:
    """Half-open (start, end) windows of `interval_days`, the last one clipped to `end`.

    Lazy and restartable: every iteration walks the range again from `start`.
    Empty when start >= end. Accepts `date` or `datetime` bounds.
    """

    def __init__(self, start: D, end: D, interval_days: int = 3) -> None:
        if interval_days <= 0:
            raise ValueError(f"interval_days must be positive, got {interval_days}")
        self.start = start
        self.end = end
        self.interval = timedelta(days=interval_days)

    def __iter__(self) -> Iterator[tuple[D, D]]:
        current = self.start
        while current < self.end:
            range_end = min(current + self.interval, self.end)
            yield current, range_end
            current = range_end

    def __repr__(self) -> str:
        return f"DateRanges({self.start!r}, {self.end!r}, interval_days={self.interval.days})"


def generate_date_ranges(start: D, end: D, interval_days: int = 3) -> DateRanges:
    """Chunk [start, end) into windows of at most `interval_days` days."""
    return DateRanges(start, end, interval_days)
