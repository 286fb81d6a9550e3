"""
pdmonitor/data/api.py
─────────────────────
Typed query functions, one per API resource.

Provides:
  - list_equipment_status()            : /equipment_status
  - list_device_status()               : /device_status
  - list_device_status_for_equipment() : /equipment_device_status
  - fetch_chart_dataset()              : /chart_data
  - format_query_date()                : canonical "date at midnight" form

Adapter failures propagate unchanged; nothing here retries.
"""
from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Any, Mapping

import pandas as pd
from pydantic import ValidationError

from pdmonitor.data.client import ApiClient
from pdmonitor.data.errors import InvalidDate, MalformedResponse
from pdmonitor.data.models import (
    ChartDataset,
    DeviceStatus,
    EquipmentStatus,
    ItemT,
    Page,
    SortOrder,
)

QUERY_DATE_FORMAT = "%Y-%m-%dT00:00:00"

_lock = threading.Lock()
_CLIENT: ApiClient | None = None


# ── Client ────────────────────────────────────────────────────────────────────

def get_client() -> ApiClient:
    global _CLIENT
    with _lock:
        if _CLIENT is None:
            _CLIENT = ApiClient()
        return _CLIENT


def close_client() -> None:
    global _CLIENT
    with _lock:
        if _CLIENT is not None:
            _CLIENT.close()
            _CLIENT = None


# ── Helpers ───────────────────────────────────────────────────────────────────

def format_query_date(value: str | date | datetime) -> str:
    """
    Normalize a date/datetime (or parsable string) to ``YYYY-MM-DDT00:00:00``.
    Any time-of-day component is discarded.

    Raises:
        InvalidDate: the value cannot be parsed as a date.
    """
    if isinstance(value, (date, datetime)):
        return value.strftime(QUERY_DATE_FORMAT)
    if not isinstance(value, str) or not value.strip():
        raise InvalidDate(value)
    try:
        ts = pd.Timestamp(value.strip())
    except (ValueError, TypeError, OverflowError) as exc:
        raise InvalidDate(value) from exc
    if pd.isna(ts):
        raise InvalidDate(value)
    return ts.strftime(QUERY_DATE_FORMAT)


def _list_params(
    skip: int,
    limit: int,
    sort_field: str,
    sort_order: SortOrder | str,
) -> dict[str, Any]:
    return {
        "skip": skip,
        "limit": limit,
        "sort_field": sort_field,
        "sort_order": SortOrder(sort_order).value,
    }


def _parse_page(
    payload: Any,
    item_model: type[ItemT],
    skip: int,
    limit: int,
) -> Page[ItemT]:
    if not isinstance(payload, Mapping):
        raise MalformedResponse()
    try:
        return Page[item_model](
            items=payload.get("items") or [],
            skip=skip,
            limit=limit,
            total=payload.get("total"),
        )
    except ValidationError as exc:
        raise MalformedResponse() from exc


def _unwrap_chart(payload: Any) -> Mapping[str, Any]:
    """
    The chart endpoint answers either with the flat bundle or with
    ``{"chart_data": {"charts": [bundle, ...]}}``; only the first chart is used.
    """
    if not isinstance(payload, Mapping):
        raise MalformedResponse()
    wrapped = payload.get("chart_data")
    if wrapped is None:
        return payload
    if not isinstance(wrapped, Mapping):
        raise MalformedResponse()
    charts = wrapped.get("charts") or []
    if not isinstance(charts, list):
        raise MalformedResponse()
    if not charts:
        # Empty chart list: keep the request metadata, no series
        return {k: v for k, v in payload.items() if k != "chart_data"}
    first = charts[0]
    if not isinstance(first, Mapping):
        raise MalformedResponse()
    return first


# ── Queries ───────────────────────────────────────────────────────────────────

def list_equipment_status(
    skip: int = 0,
    limit: int = 10,
    sort_field: str = "monitored_equipment_name",
    sort_order: SortOrder | str = SortOrder.ASC,
    client: ApiClient | None = None,
) -> Page[EquipmentStatus]:
    client = client or get_client()
    payload = client.get("/equipment_status", _list_params(skip, limit, sort_field, sort_order))
    return _parse_page(payload, EquipmentStatus, skip, limit)


def list_device_status(
    skip: int = 0,
    limit: int = 10,
    sort_field: str = "device_name",
    sort_order: SortOrder | str = SortOrder.ASC,
    client: ApiClient | None = None,
) -> Page[DeviceStatus]:
    client = client or get_client()
    payload = client.get("/device_status", _list_params(skip, limit, sort_field, sort_order))
    return _parse_page(payload, DeviceStatus, skip, limit)


def list_device_status_for_equipment(
    equipment_id: str,
    skip: int = 0,
    limit: int = 10,
    sort_field: str = "device_name",
    sort_order: SortOrder | str = SortOrder.ASC,
    client: ApiClient | None = None,
) -> Page[DeviceStatus]:
    """Sensors attached to one equipment. An empty id is left to the server."""
    client = client or get_client()
    params = {"equipment_id": equipment_id, **_list_params(skip, limit, sort_field, sort_order)}
    payload = client.get("/equipment_device_status", params)
    return _parse_page(payload, DeviceStatus, skip, limit)


def fetch_chart_dataset(
    start_time: str | date | datetime,
    end_time: str | date | datetime,
    device_id: str | None = None,
    channel: str | None = None,
    threshold_in_dbmv: float | None = None,
    initial_phase_in_degree: float | None = None,
    cycle_value: float | None = None,
    height_value: float | None = None,
    total_time: float | None = None,
    client: ApiClient | None = None,
) -> ChartDataset:
    """
    Fetch the chart bundle for one sensor/channel over a day-aligned window.

    Both timestamps are normalized before anything is sent, so an invalid
    date fails with InvalidDate without touching the network.
    """
    params: dict[str, Any] = {
        "start_time": format_query_date(start_time),
        "end_time": format_query_date(end_time),
    }
    optional = {
        "device_id": device_id,
        "channel": channel,
        "threshold_in_dBmV": threshold_in_dbmv,
        "initial_phase_in_degree": initial_phase_in_degree,
        "cycle_value": cycle_value,
        "height_value": height_value,
        "total_time": total_time,
    }
    params.update({k: v for k, v in optional.items() if v is not None})

    client = client or get_client()
    payload = client.get("/chart_data", params)
    try:
        return ChartDataset.model_validate(_unwrap_chart(payload))
    except ValidationError as exc:
        raise MalformedResponse() from exc
