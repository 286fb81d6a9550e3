"""
pdmonitor/layout/components/status_badge.py
─────────────────────────────────────────────
Equipment / sensor status indicators.
"""

from dash import html

from pdmonitor.analytics.status import (
    StatusDisplay,
    equipment_status_display,
    sensor_status_display,
)


def status_dot(display: StatusDisplay) -> html.Span:
    """Inline ``● label`` in the status colour (table cells)."""
    return html.Span(
        f"● {display.label}",
        style={"color": display.color, "fontWeight": "600", "whiteSpace": "nowrap"},
    )


def status_badge(display: StatusDisplay) -> html.Span:
    """Bordered badge (detail header)."""
    return html.Span(
        display.label,
        style={
            "fontSize": ".72rem",
            "fontWeight": "700",
            "color": display.color,
            "border": f"1px solid {display.color}",
            "borderRadius": "4px",
            "padding": "2px 8px",
            "whiteSpace": "nowrap",
        },
    )


def equipment_status_dot(raw: str | None) -> html.Span:
    return status_dot(equipment_status_display(raw))


def sensor_status_dot(raw: str | None) -> html.Span:
    return status_dot(sensor_status_display(raw))
