"""
config/status.py
────────────────
Equipment / sensor status vocabularies and display configuration.
"""

from enum import Enum


class EquipmentState(str, Enum):
    NORMAL = "normal"
    LEVEL1 = "level1"
    LEVEL2 = "level2"
    LEVEL3 = "level3"
    UNKNOWN = "unknown"


class SensorState(str, Enum):
    NORMAL = "normal"
    ABNORMAL = "abnormal"
    UNKNOWN = "unknown"


UNKNOWN_COLOR = "#8b949e"

EQUIPMENT_STATE_COLORS: dict[str, str] = {
    EquipmentState.NORMAL: "#2ea44f",
    EquipmentState.LEVEL1: "#e8a020",
    EquipmentState.LEVEL2: "#f0883e",
    EquipmentState.LEVEL3: "#da3633",
    EquipmentState.UNKNOWN: UNKNOWN_COLOR,
}

EQUIPMENT_STATE_LABELS: dict[str, str] = {
    EquipmentState.NORMAL: "正常",
    EquipmentState.LEVEL1: "一级",
    EquipmentState.LEVEL2: "二级",
    EquipmentState.LEVEL3: "三级",
    EquipmentState.UNKNOWN: "未知",
}

SENSOR_STATE_COLORS: dict[str, str] = {
    SensorState.NORMAL: "#2ea44f",
    SensorState.ABNORMAL: "#f0883e",
    SensorState.UNKNOWN: UNKNOWN_COLOR,
}

SENSOR_STATE_LABELS: dict[str, str] = {
    SensorState.NORMAL: "正常",
    SensorState.ABNORMAL: "异常",
    SensorState.UNKNOWN: "未知",
}

# Server spellings accepted for each sensor state
SENSOR_STATE_ALIASES: dict[str, SensorState] = {
    "normal": SensorState.NORMAL,
    "正常": SensorState.NORMAL,
    "abnormal": SensorState.ABNORMAL,
    "异常": SensorState.ABNORMAL,
}
