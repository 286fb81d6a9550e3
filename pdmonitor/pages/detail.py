"""
pdmonitor/pages/detail.py
─────────────────────────
Equipment detail page.

Layout: sensor selector sidebar + analysis panel (tabs, date / range /
channel controls, help panel, chart container filled by callbacks).
"""
import uuid

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.analysis import (
    ANALYSIS_TABS,
    CHANNELS,
    DEFAULT_ANALYSIS_TAB,
    TIME_RANGE_LABELS,
    TimeRange,
)
from config.settings import settings
from pdmonitor.analytics.status import equipment_status_display
from pdmonitor.data.loaders import DetailHandoff
from pdmonitor.layout.components.kpi_card import diagnosis_strip
from pdmonitor.layout.components.status_badge import status_badge
from pdmonitor.layout.sidebar import create_sensor_selector

MUTED = "#8b949e"
_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}

HELP_SUGGESTIONS = [
    "尝试选择其他日期范围",
    "确保选择的时间段在设备运行期间",
    "检查所选传感器是否正确",
]


def _header(handoff: DetailHandoff) -> html.Div:
    equipment = handoff.equipment
    return html.Div(
        [
            html.Div(
                [
                    dcc.Link("←", href="/", style={"fontSize": "1.4rem", "color": "#58a6ff", "textDecoration": "none"}),
                    html.H2(
                        equipment.monitored_equipment_name or handoff.equipment_id,
                        className="page-title",
                        style={"margin": 0},
                    ),
                    status_badge(equipment_status_display(equipment.monitored_equipment_status)),
                ],
                style={"display": "flex", "alignItems": "center", "gap": "14px"},
            ),
            html.P(
                " · ".join(p for p in [equipment.entity_name, equipment.entity_description] if p),
                className="page-subtitle",
            ),
            diagnosis_strip(equipment),
        ],
        className="page-header",
    )


def _controls() -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(
                [
                    html.Label("日期", style=_LABEL_STYLE),
                    html.Div(
                        dcc.DatePickerSingle(
                            id="detail-date",
                            date=settings.DEFAULT_DATE,
                            display_format="YYYY-MM-DD",
                        ),
                        id="detail-date-wrapper",
                    ),
                    html.Div(
                        dcc.DatePickerRange(
                            id="detail-range",
                            start_date=settings.DEFAULT_DATE,
                            end_date=settings.DEFAULT_DATE,
                            display_format="YYYY-MM-DD",
                        ),
                        id="detail-range-wrapper",
                        style={"display": "none"},
                    ),
                ],
                md=5,
            ),
            dbc.Col(
                [
                    html.Label("时间范围", style=_LABEL_STYLE),
                    dcc.Dropdown(
                        id="detail-time-range",
                        options=[{"label": label, "value": value.value} for value, label in TIME_RANGE_LABELS.items()],
                        value=TimeRange.H24.value,
                        clearable=False,
                        className="dark-dropdown",
                    ),
                ],
                md=3,
            ),
            dbc.Col(
                [
                    html.Label("通道", style=_LABEL_STYLE),
                    dbc.RadioItems(
                        id="detail-channel",
                        options=[{"label": ch, "value": ch} for ch in CHANNELS],
                        value=settings.DEFAULT_CHANNEL,
                        inline=True,
                        style={"fontSize": ".85rem", "paddingTop": "6px"},
                        inputStyle={"marginRight": "4px"},
                    ),
                ],
                md=4,
            ),
        ],
        className="g-3 mb-3",
    )


def _help_panel() -> dbc.Collapse:
    return dbc.Collapse(
        dbc.Alert(
            [
                html.P("未能找到所选时间段的数据。建议：", style={"fontSize": ".85rem", "marginBottom": "6px"}),
                html.Ul([html.Li(s, style={"fontSize": ".82rem"}) for s in HELP_SUGGESTIONS], style={"marginBottom": 0}),
            ],
            color="info",
        ),
        id="detail-help",
        is_open=False,
    )


def layout(handoff: DetailHandoff) -> html.Div:
    return html.Div(
        [
            _header(handoff),
            dcc.Store(id="detail-instance", data=uuid.uuid4().hex),

            dbc.Row(
                [
                    # ── Sidebar ───────────────────────────────────────────────
                    dbc.Col(
                        create_sensor_selector(handoff.devices, handoff.initial_sensor_id),
                        md=3,
                    ),

                    # ── Analysis panel ────────────────────────────────────────
                    dbc.Col(
                        [
                            dbc.Tabs(
                                [dbc.Tab(label=label, tab_id=tab_id) for tab_id, (label, _) in ANALYSIS_TABS.items()],
                                id="detail-analysis-tabs",
                                active_tab=DEFAULT_ANALYSIS_TAB,
                                className="mb-3",
                            ),
                            _controls(),
                            _help_panel(),
                            html.Div(
                                dcc.Loading(html.Div(id="detail-chart"), type="circle", color="#58a6ff"),
                                className="chart-card",
                            ),
                        ],
                        md=9,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )


def unavailable_layout(equipment_id: str, message: str) -> html.Div:
    """Detail URL whose sensor list could not be rebuilt."""
    return html.Div(
        [
            html.Div(
                [
                    dcc.Link("← 返回列表", href="/", style={"color": "#58a6ff"}),
                    html.H2(equipment_id, className="page-title"),
                ],
                className="page-header",
            ),
            dbc.Alert(message, color="danger"),
        ],
        style={"padding": "1.5rem"},
    )
