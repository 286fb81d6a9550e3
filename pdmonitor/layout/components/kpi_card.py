"""
pdmonitor/layout/components/kpi_card.py
────────────────────────────────────────
Compact discharge-diagnosis indicators for the detail page header.
"""
from dash import html

from pdmonitor.data.models import EquipmentStatus

MUTED = "#8b949e"
PLACEHOLDER = "-"


def mini_kpi(label: str, value: str, color: str = "#c9d1d9") -> html.Div:
    """Compact inline KPI for the diagnosis strip."""
    return html.Div([
        html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
        html.Div(value, style={"fontSize": ".85rem", "fontWeight": "700", "color": color}),
    ])


def format_severity(value: str | None) -> str:
    return f"{value}%" if value else PLACEHOLDER


def format_frequency(value: str | None) -> str:
    return f"{value}次/秒" if value else PLACEHOLDER


def diagnosis_strip(equipment: EquipmentStatus) -> html.Div:
    """Discharge type / severity / frequency / diagnosis time."""
    return html.Div(
        [
            mini_kpi("放电类型", equipment.discharge_type or "无"),
            mini_kpi("放电严重度", format_severity(equipment.discharge_severity)),
            mini_kpi("放电频次", format_frequency(equipment.discharge_frequency)),
            mini_kpi("诊断时间", equipment.diagnosis_time or PLACEHOLDER),
        ],
        style={"display": "flex", "gap": "24px", "flexWrap": "wrap"},
    )
