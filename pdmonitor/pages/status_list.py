"""
pdmonitor/pages/status_list.py
───────────────────────────────
Equipment / sensor status list page.

Static structure; table rows, pager size and caption injected via callbacks.
"""
import uuid

import dash_bootstrap_components as dbc
from dash import dcc, html

MUTED = "#8b949e"

VIEW_TITLES = {
    "equipment": "设备状态",
    "device": "传感器状态",
}


def layout(view: str = "equipment") -> html.Div:
    if view not in VIEW_TITLES:
        view = "equipment"

    children = [
        # ── Page header ───────────────────────────────────────────────────────
        html.Div(
            [
                html.H2(VIEW_TITLES[view], className="page-title"),
                html.P("局部放电在线监测 · 列表视图", className="page-subtitle"),
            ],
            className="page-header",
        ),
        # Per-instance id; stale table responses are dropped against it
        dcc.Store(id=f"{view}-instance", data=uuid.uuid4().hex),
        dcc.Store(id=f"{view}-page-items", data=[]),
    ]

    if view == "equipment":
        # Row navigation failures surface here
        children.append(
            dbc.Alert(
                id="equipment-nav-error",
                color="danger",
                is_open=False,
                dismissable=True,
                style={"fontSize": ".85rem"},
            )
        )

    children.append(
        html.Div(
            [
                dcc.Loading(html.Div(id=f"{view}-table"), type="circle", color="#58a6ff"),
                html.Div(
                    [
                        html.Span(id=f"{view}-entries", style={"fontSize": ".78rem", "color": MUTED}),
                        dbc.Pagination(
                            id=f"{view}-pagination",
                            active_page=1,
                            max_value=1,
                            previous_next=True,
                            fully_expanded=False,
                            size="sm",
                        ),
                    ],
                    style={
                        "display": "flex",
                        "alignItems": "center",
                        "justifyContent": "space-between",
                        "paddingTop": "12px",
                    },
                ),
            ],
            className="chart-card",
        )
    )

    return html.Div(children, style={"padding": "1.5rem"})
