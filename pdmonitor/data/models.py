"""
pdmonitor/data/models.py
────────────────────────
Pydantic v2 data-transfer models for the diagnostic API.

All models are read-only snapshots of one fetch; nothing mutates them
client-side.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config.status import EquipmentState, SensorState
from pdmonitor.analytics.status import parse_equipment_state, parse_sensor_state


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


def _stringify(value: object) -> object:
    # The API is loose about numeric vs text fields
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class EquipmentStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_id: str | None = None
    entity_name: str | None = None
    entity_description: str | None = None
    monitored_equipment_id: str | None = None
    monitored_equipment_name: str | None = None
    monitored_equipment_description: str | None = None
    monitored_equipment_status: str | None = None
    discharge_type: str | None = None
    discharge_severity: str | None = None
    discharge_frequency: str | None = None
    diagnosis_time: str | None = None
    report_query: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, value):
        return _stringify(value)

    @property
    def state(self) -> EquipmentState:
        return parse_equipment_state(self.monitored_equipment_status)


class DeviceStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    device_id: str
    entity_id: str | None = None
    entity_name: str | None = None
    entity_description: str | None = None
    monitored_equipment_id: str | None = None
    monitored_equipment_name: str | None = None
    monitored_equipment_description: str | None = None
    ipc_id: str | None = None
    ipc_name: str | None = None
    ipc_description: str | None = None
    device_name: str | None = None
    device_description: str | None = None
    device_firmware_version: str | None = None
    device_status: str | None = None
    device_voltage: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, value):
        return _stringify(value)

    @property
    def state(self) -> SensorState:
        return parse_sensor_state(self.device_status)


ItemT = TypeVar("ItemT", EquipmentStatus, DeviceStatus)


class Page(BaseModel, Generic[ItemT]):
    """One skip/limit window of a list endpoint."""

    items: list[ItemT] = Field(default_factory=list)
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1)
    total: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_page_size(self) -> Page:
        if len(self.items) > self.limit:
            raise ValueError(f"page holds {len(self.items)} items but limit is {self.limit}")
        return self

    @property
    def has_more(self) -> bool:
        if self.total is not None:
            return self.skip + len(self.items) < self.total
        return len(self.items) == self.limit


class ChartDataset(BaseModel):
    """
    Time-windowed bundle of parallel numeric sequences for one sensor/channel.

    Series are only type-checked here. Whether the series one chart needs
    line up is decided per chart kind, so a broken series fails its own chart
    and leaves the others drawable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_time: str | None = None
    end_time: str | None = None
    device_id: str | None = None
    channel: str | None = None
    threshold_in_dbmv: float = Field(default=0.0, alias="threshold_in_dBmV")
    initial_phase_in_degree: float = 0.0

    phases: list[float] = Field(default_factory=list)
    sine_wave: list[float] = Field(default_factory=list)
    scatter_points: list[tuple[float, float, float]] = Field(default_factory=list)
    signal_indices: list[float] = Field(default_factory=list)
    peak_values: list[float] = Field(default_factory=list)
    pulse_x: list[float] = Field(default_factory=list)
    pulse_y: list[float] = Field(default_factory=list)
    prps_x: list[float] = Field(default_factory=list)
    prps_y: list[float] = Field(default_factory=list)
    prps_z: list[list[float]] = Field(default_factory=list)

    @field_validator(
        "phases", "sine_wave", "scatter_points", "signal_indices", "peak_values",
        "pulse_x", "pulse_y", "prps_x", "prps_y", "prps_z",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value
