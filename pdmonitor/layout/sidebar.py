"""
pdmonitor/layout/sidebar.py
───────────────────────────
Sensor (collector) selector sidebar shown on the equipment detail page.
"""
import dash_bootstrap_components as dbc
from dash import html

from pdmonitor.analytics.status import sensor_status_display
from pdmonitor.data.models import DeviceStatus

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"


def sensor_label(device: DeviceStatus) -> str:
    """``name, id, location`` as shown next to each radio button."""
    parts = [device.device_name, device.device_id, device.device_description]
    return ", ".join(p for p in parts if p)


def create_sensor_selector(devices: list[DeviceStatus], selected: str | None) -> html.Div:
    """Radio list of the equipment's sensors with status indicators."""
    options = []
    for device in devices:
        status = sensor_status_display(device.device_status)
        options.append(
            {
                "label": html.Div(
                    [
                        html.Span(sensor_label(device), style={"fontSize": ".85rem", "fontWeight": "600"}),
                        html.Div(
                            f"● {status.label}",
                            style={"fontSize": ".68rem", "color": status.color},
                        ),
                    ]
                ),
                "value": device.device_id,
            }
        )

    if options:
        selector = dbc.RadioItems(
            id="detail-sensor",
            options=options,
            value=selected,
            inputStyle={"marginRight": "8px"},
            labelStyle={"cursor": "pointer", "marginBottom": "8px"},
            style={"display": "flex", "flexDirection": "column", "gap": "4px"},
        )
    else:
        selector = html.Div(
            [
                html.Div("该设备暂无传感器", style={"fontSize": ".8rem", "color": MUTED}),
                # Keeps the chart callback's input present
                dbc.RadioItems(id="detail-sensor", options=[], value=None),
            ]
        )

    return html.Div(
        [
            html.Div(
                "传感器",
                style={
                    "fontSize": ".68rem",
                    "color": MUTED,
                    "textTransform": "uppercase",
                    "letterSpacing": ".08em",
                    "marginBottom": "8px",
                },
            ),
            selector,
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "8px",
            "padding": "14px",
            "minWidth": "160px",
        },
    )
