"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the PD monitor test suite.

API access goes through httpx.MockTransport; nothing touches the network.
"""
import json
import os

import httpx
import pytest

os.environ.setdefault("API_BASE_URL", "https://api.test")
os.environ.setdefault("PAGE_SIZE", "8")


@pytest.fixture
def equipment_payload() -> dict:
    return {
        "entity_id": "E-1",
        "entity_name": "华东变电站",
        "entity_description": "上海",
        "monitored_equipment_id": "EQ-7",
        "monitored_equipment_name": "1号主变",
        "monitored_equipment_description": "110kV 主变压器",
        "monitored_equipment_status": "level2",
        "discharge_type": "沿面放电",
        "discharge_severity": 42,
        "discharge_frequency": "3.5",
        "diagnosis_time": "2020-06-13 08:00:00",
        "report_query": "查看",
    }


@pytest.fixture
def device_payloads() -> list[dict]:
    base = {
        "entity_name": "华东变电站",
        "monitored_equipment_id": "EQ-7",
        "monitored_equipment_name": "1号主变",
        "device_firmware_version": "v1.2",
        "device_voltage": 3.3,
    }
    return [
        {**base, "device_id": "S-1", "device_name": "A相", "device_description": "高压侧", "device_status": "normal"},
        {**base, "device_id": "S-2", "device_name": "B相", "device_description": "低压侧", "device_status": "异常"},
    ]


@pytest.fixture
def chart_payload() -> dict:
    return {
        "start_time": "2020-06-13T00:00:00",
        "end_time": "2020-06-13T00:00:00",
        "device_id": "S-1",
        "channel": "UHF",
        "threshold_in_dBmV": 0.0,
        "initial_phase_in_degree": 0.0,
        "phases": [0.0, 90.0, 180.0, 270.0],
        "sine_wave": [0.0, 1.0, 0.0, -1.0],
        "scatter_points": [[10.0, -40.0, 1.0], [95.0, -30.0, 5.0], [200.0, -35.0, 3.0]],
        "signal_indices": [0, 1, 2],
        "peak_values": [-50.0, -42.5, -47.0],
        "pulse_x": [0.0, 1.0],
        "pulse_y": [0.2, 0.1],
        "prps_x": [0, 1, 2],
        "prps_y": [0, 1],
        "prps_z": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
    }


class RecordingHandler:
    """MockTransport handler that answers per path and records each request."""

    def __init__(self, routes: dict) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, content=json.dumps(route).encode(), headers={"Content-Type": "application/json"})

    @property
    def last_params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def make_client():
    """Build an ApiClient over a MockTransport; returns (client, handler)."""
    from pdmonitor.data.client import ApiClient

    clients = []

    def _make(routes: dict):
        handler = RecordingHandler(routes)
        client = ApiClient(base_url="https://api.test", transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _make
    for client in clients:
        client.close()
