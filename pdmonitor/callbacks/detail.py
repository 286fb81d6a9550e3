"""
pdmonitor/callbacks/detail.py
──────────────────────────────
Equipment detail page selection callbacks.
"""
from __future__ import annotations

from dash import Input, Output

from config.analysis import TimeRange
from pdmonitor.analytics.window import parse_time_range

_SHOWN: dict = {}
_HIDDEN = {"display": "none"}

# Any change here re-renders the chart and resets the help panel
SELECTION_INPUTS = [
    Input("detail-analysis-tabs", "active_tab"),
    Input("detail-sensor", "value"),
    Input("detail-date", "date"),
    Input("detail-range", "start_date"),
    Input("detail-range", "end_date"),
    Input("detail-time-range", "value"),
    Input("detail-channel", "value"),
]


def register(app) -> None:

    @app.callback(
        Output("detail-date-wrapper", "style"),
        Output("detail-range-wrapper", "style"),
        Input("detail-time-range", "value"),
    )
    def toggle_date_pickers(time_range: str):
        if parse_time_range(time_range) is TimeRange.CUSTOM:
            return _HIDDEN, _SHOWN
        return _SHOWN, _HIDDEN
