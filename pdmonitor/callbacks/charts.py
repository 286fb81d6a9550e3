"""
pdmonitor/callbacks/charts.py
──────────────────────────────
Chart view callback for the equipment detail page.

The active analysis tab picks the chart kind; the chart is rebuilt from
scratch on every tab / sensor / window / channel change. This callback is
the only writer of the help panel: open on an empty window, closed otherwise.
"""
from __future__ import annotations

import logging

from dash import Output, State
from dash.exceptions import PreventUpdate

from config.analysis import ANALYSIS_TABS, ChartKind
from pdmonitor.analytics.window import effective_window
from pdmonitor.callbacks.detail import SELECTION_INPUTS
from pdmonitor.data.loaders import ChartOutcome, ChartState, load_chart
from pdmonitor.data.sequencer import sequencer, view_key
from pdmonitor.layout.components.figures import chart_graph, prpd_figure, prps_figure, signal_figure
from pdmonitor.layout.components.panels import empty_panel, error_panel, idle_panel, placeholder_panel

logger = logging.getLogger(__name__)

_FIGURE_BUILDERS = {
    ChartKind.PRPD: prpd_figure,
    ChartKind.PRPS: prps_figure,
    ChartKind.SIGNAL: signal_figure,
}


def tab_chart_kind(active_tab: str | None) -> ChartKind | None:
    _, kind = ANALYSIS_TABS.get(active_tab or "", (None, None))
    return kind if kind in _FIGURE_BUILDERS else None


def render_outcome(outcome: ChartOutcome):
    if outcome.state is ChartState.IDLE:
        return idle_panel(outcome.message)
    if outcome.state is ChartState.EMPTY:
        return empty_panel(outcome.message)
    if outcome.state is ChartState.ERROR:
        return error_panel(outcome.message or "加载数据失败")
    fig = _FIGURE_BUILDERS[outcome.kind](outcome.dataset)
    return chart_graph(fig, f"chart-{outcome.kind.value}")


def register(app) -> None:

    @app.callback(
        Output("detail-chart", "children"),
        Output("detail-help", "is_open"),
        *SELECTION_INPUTS,
        State("detail-instance", "data"),
    )
    def update_chart(
        active_tab: str,
        sensor_id: str | None,
        selected_date: str | None,
        custom_start: str | None,
        custom_end: str | None,
        time_range: str,
        channel: str,
        instance_id: str,
    ):
        # Every selection change supersedes the request in flight, placeholder tabs included
        key = view_key(instance_id, "chart")
        token = sequencer.issue(key)

        kind = tab_chart_kind(active_tab)
        if kind is None:
            return placeholder_panel(), False

        window = effective_window(time_range, selected_date, custom_start, custom_end)
        outcome = load_chart(kind, sensor_id, window, channel)
        if not sequencer.is_current(key, token):
            logger.debug("dropping stale chart response", extra={"view": kind.value, "device_id": sensor_id})
            raise PreventUpdate
        return render_outcome(outcome), outcome.state is ChartState.EMPTY
