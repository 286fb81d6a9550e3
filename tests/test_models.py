"""
tests/test_models.py
─────────────────────
Tests for Pydantic v2 data models.
"""
import pytest
from pydantic import ValidationError

from config.status import EquipmentState, SensorState
from pdmonitor.data.models import ChartDataset, DeviceStatus, EquipmentStatus, Page


class TestEquipmentStatus:
    def test_valid_record(self, equipment_payload):
        eq = EquipmentStatus.model_validate(equipment_payload)
        assert eq.monitored_equipment_id == "EQ-7"
        assert eq.state is EquipmentState.LEVEL2

    def test_numbers_become_text(self, equipment_payload):
        eq = EquipmentStatus.model_validate(equipment_payload)
        assert eq.discharge_severity == "42"

    def test_all_fields_optional(self):
        eq = EquipmentStatus()
        assert eq.monitored_equipment_id is None
        assert eq.state is EquipmentState.UNKNOWN

    def test_frozen(self, equipment_payload):
        eq = EquipmentStatus.model_validate(equipment_payload)
        with pytest.raises(ValidationError):
            eq.monitored_equipment_name = "other"

    def test_model_dump_round_trip(self, equipment_payload):
        eq = EquipmentStatus.model_validate(equipment_payload)
        assert EquipmentStatus.model_validate(eq.model_dump()) == eq


class TestDeviceStatus:
    def test_device_id_required(self):
        with pytest.raises(ValidationError):
            DeviceStatus(device_name="A相")

    def test_voltage_coerced(self, device_payloads):
        dev = DeviceStatus.model_validate(device_payloads[0])
        assert dev.device_voltage == "3.3"

    def test_state_aliases(self, device_payloads):
        normal, abnormal = (DeviceStatus.model_validate(d) for d in device_payloads)
        assert normal.state is SensorState.NORMAL
        assert abnormal.state is SensorState.ABNORMAL


class TestPage:
    def test_has_more_from_total(self):
        page = Page[EquipmentStatus](items=[EquipmentStatus()] * 8, skip=0, limit=8, total=16)
        assert page.has_more
        last = Page[EquipmentStatus](items=[EquipmentStatus()] * 8, skip=8, limit=8, total=16)
        assert not last.has_more

    def test_has_more_without_total(self):
        full = Page[EquipmentStatus](items=[EquipmentStatus()] * 8, skip=0, limit=8)
        short = Page[EquipmentStatus](items=[EquipmentStatus()] * 3, skip=8, limit=8)
        assert full.has_more
        assert not short.has_more

    def test_items_never_exceed_limit(self):
        with pytest.raises(ValidationError):
            Page[EquipmentStatus](items=[EquipmentStatus()] * 9, skip=0, limit=8)

    def test_negative_skip_rejected(self):
        with pytest.raises(ValidationError):
            Page[DeviceStatus](items=[], skip=-1, limit=8)


class TestChartDataset:
    def test_valid_bundle(self, chart_payload):
        ds = ChartDataset.model_validate(chart_payload)
        assert ds.threshold_in_dbmv == 0.0
        assert ds.scatter_points[1] == (95.0, -30.0, 5.0)
        assert len(ds.prps_z) == len(ds.prps_y)

    def test_null_arrays_are_empty(self):
        ds = ChartDataset.model_validate({"phases": None, "prps_z": None})
        assert ds.phases == []
        assert ds.prps_z == []

    def test_mismatched_series_still_parse(self, chart_payload):
        chart_payload["peak_values"] = [1.0]
        chart_payload["sine_wave"] = [0.0, 1.0]
        chart_payload["prps_z"] = [[1.0, 2.0]]
        ds = ChartDataset.model_validate(chart_payload)
        assert ds.peak_values == [1.0]
        assert ds.prps_z == [[1.0, 2.0]]

    def test_bad_element_type(self, chart_payload):
        chart_payload["phases"] = ["north"]
        with pytest.raises(ValidationError):
            ChartDataset.model_validate(chart_payload)

    def test_scatter_point_shape(self, chart_payload):
        chart_payload["scatter_points"] = [[1.0, 2.0]]
        with pytest.raises(ValidationError):
            ChartDataset.model_validate(chart_payload)
