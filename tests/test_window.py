"""
tests/test_window.py
─────────────────────
Tests for the detail-page query window.
"""
from config.analysis import TimeRange
from pdmonitor.analytics.window import QueryWindow, effective_window, parse_time_range


class TestParseTimeRange:
    def test_known(self):
        assert parse_time_range("custom") is TimeRange.CUSTOM
        assert parse_time_range("7d") is TimeRange.D7

    def test_unknown_falls_back(self):
        assert parse_time_range("fortnight") is TimeRange.H24
        assert parse_time_range(None) is TimeRange.H24


class TestEffectiveWindow:
    def test_fixed_range_uses_selected_date(self):
        w = effective_window("24h", "2020-06-13", "2020-06-01", "2020-06-05")
        assert w == QueryWindow("2020-06-13", "2020-06-13")
        assert w.complete

    def test_custom_range(self):
        w = effective_window("custom", "2020-06-13", "2020-06-01", "2020-06-05")
        assert w == QueryWindow("2020-06-01", "2020-06-05")

    def test_custom_range_incomplete(self):
        assert not effective_window("custom", "2020-06-13", "2020-06-01", None).complete

    def test_no_date(self):
        assert not effective_window("48h", None, None, None).complete
