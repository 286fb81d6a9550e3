"""
pdmonitor/data/loaders.py
─────────────────────────
View-boundary loaders: call the typed queries, catch ApiError, and return
Result objects the callbacks render.

  - load_equipment_page() / load_device_page() : list views
  - load_detail_handoff() / rebuild_handoff()  : equipment row → detail view
  - load_chart()                               : chart views
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from config.analysis import CHART_INITIAL_PHASE_DEG, CHART_THRESHOLD_DBMV, ChartKind
from config.settings import settings
from pdmonitor.analytics.pagination import page_window
from pdmonitor.analytics.projections import has_data, series_problem
from pdmonitor.analytics.window import QueryWindow
from pdmonitor.data import api
from pdmonitor.data.client import ApiClient
from pdmonitor.data.errors import ApiError, MalformedResponse
from pdmonitor.data.models import ChartDataset, DeviceStatus, EquipmentStatus, Page

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "加载数据失败"


# ── List views ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TableResult:
    page_number: int
    page: Page | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.page is not None


def _load_page(view: str, query, page_number: int, page_size: int, client: ApiClient | None) -> TableResult:
    window = page_window(page_number, page_size)
    page_number = window.skip // page_size + 1
    try:
        page = query(skip=window.skip, limit=window.limit, client=client)
    except ApiError as exc:
        logger.warning("table load failed: %s", exc, extra={"view": view, "page": page_number})
        return TableResult(page_number=page_number, error=str(exc) or LOAD_FAILED_MESSAGE)
    return TableResult(page_number=page_number, page=page)


def load_equipment_page(
    page_number: int,
    page_size: int | None = None,
    client: ApiClient | None = None,
) -> TableResult:
    return _load_page(
        "equipment", api.list_equipment_status, page_number, page_size or settings.PAGE_SIZE, client
    )


def load_device_page(
    page_number: int,
    page_size: int | None = None,
    client: ApiClient | None = None,
) -> TableResult:
    return _load_page(
        "device", api.list_device_status, page_number, page_size or settings.PAGE_SIZE, client
    )


# ── Equipment row → detail handoff ────────────────────────────────────────────

@dataclass(frozen=True)
class DetailHandoff:
    """Equipment record plus its sensors, or the reason they could not be loaded."""

    equipment: EquipmentStatus
    devices: list[DeviceStatus] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def equipment_id(self) -> str:
        return self.equipment.monitored_equipment_id or ""

    @property
    def initial_sensor_id(self) -> str | None:
        return initial_sensor_id(self.devices)

    def to_store(self) -> dict[str, Any]:
        return {
            "equipment": self.equipment.model_dump(),
            "devices": [d.model_dump() for d in self.devices],
        }

    @classmethod
    def from_store(cls, data: dict[str, Any] | None) -> DetailHandoff | None:
        if not data or not data.get("equipment"):
            return None
        return cls(
            equipment=EquipmentStatus.model_validate(data["equipment"]),
            devices=[DeviceStatus.model_validate(d) for d in data.get("devices") or []],
        )


def initial_sensor_id(devices: list[DeviceStatus]) -> str | None:
    return devices[0].device_id if devices else None


def load_detail_handoff(
    equipment: EquipmentStatus,
    client: ApiClient | None = None,
    limit: int | None = None,
) -> DetailHandoff:
    equipment_id = equipment.monitored_equipment_id or ""
    try:
        page = api.list_device_status_for_equipment(
            equipment_id,
            skip=0,
            limit=limit or settings.HANDOFF_DEVICE_LIMIT,
            sort_field="device_name",
            client=client,
        )
    except ApiError as exc:
        logger.warning(
            "sensor list for equipment failed: %s", exc, extra={"equipment_id": equipment_id}
        )
        return DetailHandoff(equipment=equipment, error=str(exc) or LOAD_FAILED_MESSAGE)
    return DetailHandoff(equipment=equipment, devices=list(page.items))


def rebuild_handoff(equipment_id: str, client: ApiClient | None = None) -> DetailHandoff:
    """
    Direct navigation to a detail URL: only the id is known, so the
    equipment name falls back to the id (or the sensors' equipment name).
    """
    handoff = load_detail_handoff(
        EquipmentStatus(monitored_equipment_id=equipment_id, monitored_equipment_name=equipment_id),
        client=client,
    )
    if handoff.ok and handoff.devices and handoff.devices[0].monitored_equipment_name:
        first = handoff.devices[0]
        equipment = handoff.equipment.model_copy(
            update={
                "monitored_equipment_name": first.monitored_equipment_name,
                "monitored_equipment_description": first.monitored_equipment_description,
                "entity_name": first.entity_name,
            }
        )
        return DetailHandoff(equipment=equipment, devices=handoff.devices)
    return handoff


# ── Chart views ───────────────────────────────────────────────────────────────

class ChartState(str, Enum):
    IDLE = "idle"        # nothing to query (no sensor / incomplete window)
    EMPTY = "empty"      # valid answer, no data in the window
    ERROR = "error"
    LOADED = "loaded"


@dataclass(frozen=True)
class ChartOutcome:
    kind: ChartKind
    state: ChartState
    dataset: ChartDataset | None = None
    message: str | None = None


def load_chart(
    kind: ChartKind,
    sensor_id: str | None,
    window: QueryWindow,
    channel: str | None = None,
    client: ApiClient | None = None,
) -> ChartOutcome:
    if not sensor_id:
        return ChartOutcome(kind, ChartState.IDLE, message="请选择传感器")
    if not window.complete:
        return ChartOutcome(kind, ChartState.IDLE, message="请选择时间段查看数据")

    try:
        dataset = api.fetch_chart_dataset(
            window.start,
            window.end,
            device_id=sensor_id,
            channel=channel or settings.DEFAULT_CHANNEL,
            threshold_in_dbmv=CHART_THRESHOLD_DBMV,
            initial_phase_in_degree=CHART_INITIAL_PHASE_DEG,
            client=client,
        )
    except ApiError as exc:
        logger.warning(
            "chart load failed: %s", exc, extra={"view": kind.value, "device_id": sensor_id}
        )
        return ChartOutcome(kind, ChartState.ERROR, message=str(exc) or LOAD_FAILED_MESSAGE)

    if not has_data(dataset, kind):
        logger.info("no data in window", extra={"view": kind.value, "device_id": sensor_id})
        return ChartOutcome(kind, ChartState.EMPTY, dataset=dataset, message="所选时间段内无数据")

    problem = series_problem(dataset, kind)
    if problem is not None:
        logger.warning(
            "chart series unusable: %s", problem, extra={"view": kind.value, "device_id": sensor_id}
        )
        return ChartOutcome(kind, ChartState.ERROR, dataset=dataset, message=str(MalformedResponse()))
    return ChartOutcome(kind, ChartState.LOADED, dataset=dataset)
