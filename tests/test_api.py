"""
tests/test_api.py
──────────────────
Tests for the typed query functions.
"""
from datetime import date, datetime

import pytest

from pdmonitor.data import api
from pdmonitor.data.errors import InvalidDate, MalformedResponse
from pdmonitor.data.models import SortOrder


class TestFormatQueryDate:
    def test_time_of_day_discarded(self):
        assert api.format_query_date("2020-06-13T15:00:00") == "2020-06-13T00:00:00"

    def test_plain_date_string(self):
        assert api.format_query_date("2020-06-13") == "2020-06-13T00:00:00"

    def test_date_objects(self):
        assert api.format_query_date(date(2020, 6, 13)) == "2020-06-13T00:00:00"
        assert api.format_query_date(datetime(2020, 6, 13, 23, 59)) == "2020-06-13T00:00:00"

    @pytest.mark.parametrize(
        "value",
        ["2020-06-13T00:00:00", "2020-06-13T08:30:00", "2020-06-13T12:00:00", "2020-06-13T23:59:59", "2020-06-13"],
    )
    def test_same_calendar_date_for_any_time(self, value):
        formatted = api.format_query_date(value)
        assert formatted.endswith("T00:00:00")
        assert datetime.fromisoformat(formatted).date() == date(2020, 6, 13)
        assert api.format_query_date(formatted) == formatted

    @pytest.mark.parametrize("value", ["not-a-date", "", "   ", None, "2020-13-45"])
    def test_invalid(self, value):
        with pytest.raises(InvalidDate):
            api.format_query_date(value)


class TestListQueries:
    def test_equipment_defaults(self, make_client, equipment_payload):
        client, handler = make_client({"/equipment_status": {"items": [equipment_payload]}})
        page = api.list_equipment_status(client=client)
        assert handler.last_params == {
            "skip": "0",
            "limit": "10",
            "sort_field": "monitored_equipment_name",
            "sort_order": "ASC",
        }
        assert page.items[0].monitored_equipment_id == "EQ-7"
        assert page.total is None

    def test_device_page_window(self, make_client, device_payloads):
        client, handler = make_client({"/device_status": {"items": device_payloads, "total": 10}})
        page = api.list_device_status(skip=8, limit=8, sort_order=SortOrder.DESC, client=client)
        assert handler.last_params["skip"] == "8"
        assert handler.last_params["sort_field"] == "device_name"
        assert handler.last_params["sort_order"] == "DESC"
        assert page.total == 10
        assert not page.has_more

    def test_devices_for_equipment(self, make_client, device_payloads):
        client, handler = make_client({"/equipment_device_status": {"items": device_payloads}})
        page = api.list_device_status_for_equipment("EQ-7", limit=100, client=client)
        assert handler.last_params["equipment_id"] == "EQ-7"
        assert [d.device_id for d in page.items] == ["S-1", "S-2"]

    def test_sort_order_text_accepted(self, make_client):
        client, handler = make_client({"/device_status": {"items": []}})
        api.list_device_status(sort_order="DESC", client=client)
        assert handler.last_params["sort_order"] == "DESC"

    def test_missing_items_is_empty_page(self, make_client):
        client, _ = make_client({"/equipment_status": {}})
        page = api.list_equipment_status(client=client)
        assert page.items == []

    def test_oversized_page_is_malformed(self, make_client, equipment_payload):
        client, _ = make_client({"/equipment_status": {"items": [equipment_payload] * 3}})
        with pytest.raises(MalformedResponse):
            api.list_equipment_status(limit=2, client=client)

    def test_non_object_payload(self, make_client):
        client, _ = make_client({"/equipment_status": [1, 2, 3]})
        with pytest.raises(MalformedResponse):
            api.list_equipment_status(client=client)


class TestFetchChartDataset:
    def test_flat_bundle(self, make_client, chart_payload):
        client, handler = make_client({"/chart_data": chart_payload})
        ds = api.fetch_chart_dataset(
            "2020-06-13T15:00:00",
            "2020-06-13",
            device_id="S-1",
            channel="UHF",
            threshold_in_dbmv=0.0,
            initial_phase_in_degree=0.0,
            client=client,
        )
        params = handler.last_params
        assert params["start_time"] == "2020-06-13T00:00:00"
        assert params["end_time"] == "2020-06-13T00:00:00"
        assert params["threshold_in_dBmV"] == "0.0"
        assert "cycle_value" not in params
        assert ds.device_id == "S-1"
        assert len(ds.peak_values) == 3

    def test_wrapped_bundle(self, make_client, chart_payload):
        client, _ = make_client({"/chart_data": {"chart_data": {"charts": [chart_payload]}}})
        ds = api.fetch_chart_dataset("2020-06-13", "2020-06-13", device_id="S-1", client=client)
        assert ds.prps_z == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_wrapped_empty_chart_list(self, make_client):
        payload = {"device_id": "S-1", "chart_data": {"charts": []}}
        client, _ = make_client({"/chart_data": payload})
        ds = api.fetch_chart_dataset("2020-06-13", "2020-06-13", client=client)
        assert ds.device_id == "S-1"
        assert ds.phases == []

    def test_invalid_date_sends_nothing(self, make_client, chart_payload):
        client, handler = make_client({"/chart_data": chart_payload})
        with pytest.raises(InvalidDate):
            api.fetch_chart_dataset("garbage", "2020-06-13", client=client)
        assert handler.requests == []

    def test_badly_typed_bundle_is_malformed(self, make_client, chart_payload):
        chart_payload["scatter_points"] = [[1.0, 2.0]]
        client, _ = make_client({"/chart_data": chart_payload})
        with pytest.raises(MalformedResponse):
            api.fetch_chart_dataset("2020-06-13", "2020-06-13", client=client)
