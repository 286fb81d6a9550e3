"""
pdmonitor/callbacks/navigation.py
──────────────────────────────────
Page routing, navbar collapse and the equipment / sensor list toggle.
"""
from __future__ import annotations

import logging
from urllib.parse import unquote

from dash import Input, Output, State, ctx
from dash.exceptions import PreventUpdate

from pdmonitor.data import loaders
from pdmonitor.data.loaders import DetailHandoff
from pdmonitor.pages import detail, status_list

logger = logging.getLogger(__name__)

DETAIL_PREFIX = "/equipment/"


def detail_equipment_id(pathname: str | None) -> str | None:
    """``/equipment/<id>`` → ``<id>``; None for any other path."""
    if not pathname or not pathname.startswith(DETAIL_PREFIX):
        return None
    equipment_id = unquote(pathname[len(DETAIL_PREFIX):]).strip("/")
    return equipment_id or None


def register(app) -> None:
    """Register routing + navbar callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
        Input("store-list-view", "data"),
        State("store-detail", "data"),
    )
    def display_page(pathname: str, list_view: str, detail_data: dict | None):
        equipment_id = detail_equipment_id(pathname)
        if equipment_id is None:
            return status_list.layout(list_view or "equipment")

        handoff = DetailHandoff.from_store(detail_data)
        if handoff is None or handoff.equipment_id != equipment_id:
            # Navigation state is memory-only; rebuild it from the API
            logger.info("rebuilding detail state", extra={"equipment_id": equipment_id})
            handoff = loaders.rebuild_handoff(equipment_id)
            if not handoff.ok:
                return detail.unavailable_layout(equipment_id, handoff.error)
        return detail.layout(handoff)

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Equipment / sensor list toggle ────────────────────────────────────────
    @app.callback(
        Output("store-list-view", "data"),
        Input("nav-equipment", "n_clicks"),
        Input("nav-device", "n_clicks"),
        prevent_initial_call=True,
    )
    def select_list_view(n_equipment: int, n_device: int) -> str:
        if ctx.triggered_id not in ("nav-equipment", "nav-device"):
            raise PreventUpdate
        return "device" if ctx.triggered_id == "nav-device" else "equipment"

    @app.callback(
        Output("nav-equipment", "active"),
        Output("nav-device", "active"),
        Input("store-list-view", "data"),
        Input("url", "pathname"),
    )
    def highlight_nav(list_view: str, pathname: str):
        if detail_equipment_id(pathname) is not None:
            return False, False
        return list_view != "device", list_view == "device"
