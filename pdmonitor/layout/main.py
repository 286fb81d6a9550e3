"""
pdmonitor/layout/main.py
────────────────────────
Root layout: routing, navigation-scoped stores, navbar, page container.

Nothing is persisted in the browser; both stores live in memory and are
rebuilt from the API after a reload.
"""
from dash import dcc, html

from config.settings import settings
from pdmonitor.layout.navbar import BRAND, create_navbar

PAGE_BG = "#0d1117"
TEXT = "#c9d1d9"
MUTED = "#8b949e"


def _footer() -> html.Footer:
    return html.Footer(
        [
            html.Span(BRAND),
            html.Span(" · "),
            html.Span(f"数据源 {settings.API_BASE_URL}"),
        ],
        style={
            "textAlign": "center",
            "padding": ".7rem",
            "fontSize": ".72rem",
            "color": MUTED,
            "borderTop": "1px solid #30363d",
            "marginTop": "2rem",
        },
    )


def create_layout() -> html.Div:
    stores = [
        # "equipment" | "device"
        dcc.Store(id="store-list-view", data="equipment", storage_type="memory"),
        # DetailHandoff.to_store() of the equipment being viewed
        dcc.Store(id="store-detail", data=None, storage_type="memory"),
    ]
    return html.Div(
        [
            *stores,
            dcc.Location(id="url", refresh=False),
            create_navbar(),
            html.Div(id="page-content", style={"minHeight": "calc(100vh - 60px)"}),
            _footer(),
        ],
        style={"backgroundColor": PAGE_BG, "minHeight": "100vh", "color": TEXT},
    )
