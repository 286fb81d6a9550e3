"""
pdmonitor/analytics/window.py
──────────────────────────────
Detail-page selection → effective chart query window.
"""
from __future__ import annotations

from dataclasses import dataclass

from config.analysis import TimeRange


@dataclass(frozen=True)
class QueryWindow:
    start: str | None
    end: str | None

    @property
    def complete(self) -> bool:
        return bool(self.start) and bool(self.end)


def parse_time_range(raw: str | None) -> TimeRange:
    try:
        return TimeRange(raw)
    except ValueError:
        return TimeRange.H24


def effective_window(
    time_range: str | None,
    selected_date: str | None,
    custom_start: str | None,
    custom_end: str | None,
) -> QueryWindow:
    """
    Custom mode uses the start/end pair; every other mode queries the single
    selected date as both ends of the window.
    """
    if parse_time_range(time_range) is TimeRange.CUSTOM:
        return QueryWindow(start=custom_start, end=custom_end)
    return QueryWindow(start=selected_date, end=selected_date)
