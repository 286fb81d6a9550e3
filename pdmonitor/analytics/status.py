"""
pdmonitor/analytics/status.py
──────────────────────────────
Server status strings → exhaustive state enums → display label / colour.

Every unmapped or missing value lands in the UNKNOWN variant.
"""
from __future__ import annotations

from dataclasses import dataclass

from config.status import (
    EQUIPMENT_STATE_COLORS,
    EQUIPMENT_STATE_LABELS,
    SENSOR_STATE_ALIASES,
    SENSOR_STATE_COLORS,
    SENSOR_STATE_LABELS,
    EquipmentState,
    SensorState,
)


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    color: str


def parse_equipment_state(raw: str | None) -> EquipmentState:
    if not raw:
        return EquipmentState.UNKNOWN
    try:
        state = EquipmentState(raw.strip().lower())
    except ValueError:
        return EquipmentState.UNKNOWN
    return state


def parse_sensor_state(raw: str | None) -> SensorState:
    if not raw:
        return SensorState.UNKNOWN
    return SENSOR_STATE_ALIASES.get(raw.strip().lower(), SensorState.UNKNOWN)


def equipment_status_display(raw: str | None) -> StatusDisplay:
    state = parse_equipment_state(raw)
    return StatusDisplay(EQUIPMENT_STATE_LABELS[state], EQUIPMENT_STATE_COLORS[state])


def sensor_status_display(raw: str | None) -> StatusDisplay:
    """Unknown sensor values keep their raw text as the label."""
    state = parse_sensor_state(raw)
    label = SENSOR_STATE_LABELS[state]
    if state is SensorState.UNKNOWN and raw and raw.strip():
        label = raw.strip()
    return StatusDisplay(label, SENSOR_STATE_COLORS[state])
