"""
pdmonitor/callbacks/tables.py
──────────────────────────────
Equipment / sensor list callbacks: paged loading with inline retry, and the
equipment row → detail handoff.
"""
from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import quote

from dash import ALL, Input, Output, State, ctx, no_update
from dash.exceptions import PreventUpdate

from config.settings import settings
from pdmonitor.analytics.pagination import entries_caption, total_pages
from pdmonitor.data import loaders
from pdmonitor.data.loaders import TableResult
from pdmonitor.data.models import EquipmentStatus
from pdmonitor.data.sequencer import sequencer, view_key
from pdmonitor.layout.components.panels import retry_panel
from pdmonitor.layout.components.tables import device_table, equipment_table

logger = logging.getLogger(__name__)


def table_outputs(view: str, result: TableResult, build_table: Callable, page_size: int):
    """Result → (table, pager size, caption, page items) for one list view."""
    if not result.ok:
        return retry_panel(result.error, view), no_update, "", []
    page = result.page
    pages = total_pages(result.page_number, page_size, page.total, page.has_more)
    caption = entries_caption(result.page_number, page_size, len(page.items), page.total)
    return build_table(page.items), pages, caption, [item.model_dump() for item in page.items]


def find_equipment(items: list[dict] | None, equipment_id: str) -> EquipmentStatus | None:
    for item in items or []:
        if item.get("monitored_equipment_id") == equipment_id:
            return EquipmentStatus.model_validate(item)
    return None


def _register_table(app, view: str, load_page: Callable[[int], TableResult], build_table: Callable) -> None:

    @app.callback(
        Output(f"{view}-table", "children"),
        Output(f"{view}-pagination", "max_value"),
        Output(f"{view}-entries", "children"),
        Output(f"{view}-page-items", "data"),
        Input(f"{view}-pagination", "active_page"),
        Input({"type": f"{view}-retry", "index": ALL}, "n_clicks"),
        State(f"{view}-instance", "data"),
    )
    def update_table(active_page: int | None, retry_clicks: list, instance_id: str):
        # A freshly rendered retry button is not a click
        if isinstance(ctx.triggered_id, dict) and not any(retry_clicks or []):
            raise PreventUpdate

        key = view_key(instance_id, view)
        token = sequencer.issue(key)
        result = load_page(active_page or 1)
        if not sequencer.is_current(key, token):
            logger.debug("dropping stale table response", extra={"view": view, "page": active_page})
            raise PreventUpdate
        return table_outputs(view, result, build_table, settings.PAGE_SIZE)


def register(app) -> None:

    _register_table(app, "equipment", loaders.load_equipment_page, equipment_table)
    _register_table(app, "device", loaders.load_device_page, device_table)

    # ── Equipment row → detail view ───────────────────────────────────────────
    @app.callback(
        Output("store-detail", "data"),
        Output("url", "pathname"),
        Output("equipment-nav-error", "children"),
        Output("equipment-nav-error", "is_open"),
        Input({"type": "report-btn", "index": ALL}, "n_clicks"),
        State("equipment-page-items", "data"),
        prevent_initial_call=True,
    )
    def open_equipment_detail(n_clicks_list: list, page_items: list[dict]):
        if not ctx.triggered_id or not ctx.triggered or not ctx.triggered[0]["value"]:
            raise PreventUpdate
        equipment_id = ctx.triggered_id["index"]
        equipment = find_equipment(page_items, equipment_id)
        if equipment is None:
            raise PreventUpdate

        handoff = loaders.load_detail_handoff(equipment)
        if not handoff.ok:
            return no_update, no_update, f"无法打开设备 {equipment.monitored_equipment_name or equipment_id}：{handoff.error}", True
        return handoff.to_store(), f"/equipment/{quote(equipment_id, safe='')}", no_update, False
