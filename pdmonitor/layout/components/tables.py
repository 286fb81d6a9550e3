"""
pdmonitor/layout/components/tables.py
──────────────────────────────────────
Equipment and sensor status tables.
"""
from __future__ import annotations

from dash import html

from pdmonitor.data.models import DeviceStatus, EquipmentStatus
from pdmonitor.layout.components.kpi_card import format_frequency, format_severity
from pdmonitor.layout.components.status_badge import equipment_status_dot, sensor_status_dot

BORDER = "#30363d"
MUTED = "#8b949e"
ACCENT = "#58a6ff"

EQUIPMENT_HEADERS = [
    "项目名称", "项目地点", "监测设备", "放电类型", "放电严重度",
    "放电频次", "诊断时间", "设备状态", "报告查询",
]
DEVICE_HEADERS = [
    "项目名称", "监测设备", "安装位置", "传感器名称", "传感器电压",
    "固件版本号", "传感器ID", "传感器状态",
]

_CELL = {"fontSize": ".8rem", "padding": "8px 12px"}
_ROW = {"borderBottom": f"1px solid {BORDER}"}


def _table(headers: list[str], rows: list[html.Tr]) -> html.Div:
    return html.Div(
        html.Table(
            [
                html.Thead(
                    html.Tr(
                        [html.Th(h, style={"padding": "8px 12px"}) for h in headers],
                        style={"color": MUTED, "fontSize": ".68rem", "textTransform": "uppercase"},
                    )
                ),
                html.Tbody(rows),
            ],
            style={"width": "100%", "borderCollapse": "collapse", "fontSize": ".82rem"},
        ),
        style={"overflowX": "auto"},
    )


def _empty(message: str) -> html.Div:
    return html.Div(message, style={"color": MUTED, "padding": "20px", "textAlign": "center"})


def _report_button(equipment: EquipmentStatus) -> html.Button | html.Span:
    # Rows without an id cannot be opened; pattern ids must stay unique
    if not equipment.monitored_equipment_id:
        return html.Span("-", style={"color": MUTED})
    return html.Button(
        f"👁 {equipment.report_query or '查看'}",
        id={"type": "report-btn", "index": equipment.monitored_equipment_id},
        n_clicks=0,
        style={
            "fontSize": ".72rem",
            "fontWeight": "600",
            "color": ACCENT,
            "background": "transparent",
            "border": "none",
            "cursor": "pointer",
            "padding": 0,
        },
    )


def equipment_table(items: list[EquipmentStatus]) -> html.Div:
    if not items:
        return _empty("暂无设备数据")
    rows = [
        html.Tr(
            [
                html.Td(eq.entity_name, style=_CELL),
                html.Td(eq.entity_description, style=_CELL),
                html.Td(eq.monitored_equipment_name, style={**_CELL, "color": ACCENT, "fontWeight": "600"}),
                html.Td(eq.discharge_type or "无", style=_CELL),
                html.Td(format_severity(eq.discharge_severity), style=_CELL),
                html.Td(format_frequency(eq.discharge_frequency), style=_CELL),
                html.Td(eq.diagnosis_time, style={**_CELL, "color": MUTED}),
                html.Td(equipment_status_dot(eq.monitored_equipment_status), style=_CELL),
                html.Td(_report_button(eq), style=_CELL),
            ],
            style=_ROW,
        )
        for eq in items
    ]
    return _table(EQUIPMENT_HEADERS, rows)


def device_table(items: list[DeviceStatus]) -> html.Div:
    if not items:
        return _empty("暂无传感器数据")
    rows = [
        html.Tr(
            [
                html.Td(dev.entity_name, style=_CELL),
                html.Td(dev.monitored_equipment_name, style=_CELL),
                html.Td(dev.device_description, style=_CELL),
                html.Td(dev.device_name, style={**_CELL, "fontWeight": "600"}),
                html.Td(dev.device_voltage, style=_CELL),
                html.Td(dev.device_firmware_version, style={**_CELL, "color": MUTED}),
                html.Td(dev.device_id, style={**_CELL, "color": MUTED}),
                html.Td(sensor_status_dot(dev.device_status), style=_CELL),
            ],
            style=_ROW,
        )
        for dev in items
    ]
    return _table(DEVICE_HEADERS, rows)
