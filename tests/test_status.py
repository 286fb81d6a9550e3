"""
tests/test_status.py
─────────────────────
Tests for status parsing and display mapping.
"""
import pytest

from config.status import (
    EQUIPMENT_STATE_COLORS,
    SENSOR_STATE_COLORS,
    UNKNOWN_COLOR,
    EquipmentState,
    SensorState,
)
from pdmonitor.analytics.status import (
    equipment_status_display,
    parse_equipment_state,
    parse_sensor_state,
    sensor_status_display,
)


class TestEquipmentState:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("normal", EquipmentState.NORMAL),
            ("level1", EquipmentState.LEVEL1),
            ("Level2 ", EquipmentState.LEVEL2),
            ("level3", EquipmentState.LEVEL3),
        ],
    )
    def test_known(self, raw, expected):
        assert parse_equipment_state(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "level9", "critical"])
    def test_unknown(self, raw):
        assert parse_equipment_state(raw) is EquipmentState.UNKNOWN

    def test_every_state_has_display(self):
        for state in EquipmentState:
            assert state in EQUIPMENT_STATE_COLORS

    def test_display(self):
        d = equipment_status_display("level3")
        assert d.label == "三级"
        assert d.color == "#da3633"
        assert equipment_status_display("???").color == UNKNOWN_COLOR


class TestSensorState:
    def test_aliases(self):
        assert parse_sensor_state("正常") is SensorState.NORMAL
        assert parse_sensor_state("ABNORMAL") is SensorState.ABNORMAL
        assert parse_sensor_state("offline") is SensorState.UNKNOWN

    def test_every_state_has_colour(self):
        for state in SensorState:
            assert state in SENSOR_STATE_COLORS

    def test_unknown_keeps_raw_label(self):
        d = sensor_status_display("离线")
        assert d.label == "离线"
        assert d.color == UNKNOWN_COLOR

    def test_missing(self):
        assert sensor_status_display(None).label == "未知"
