"""
pdmonitor/layout/components/panels.py
──────────────────────────────────────
Non-chart panels: idle prompt, empty window, error, placeholder, retry.
"""
from dash import html

MUTED = "#8b949e"
DANGER = "#da3633"
ACCENT = "#58a6ff"
PANEL_HEIGHT = "500px"

_PANEL_STYLE = {
    "display": "flex",
    "flexDirection": "column",
    "alignItems": "center",
    "justifyContent": "center",
    "height": PANEL_HEIGHT,
    "color": MUTED,
}


def message_panel(message: str, hint: str | None = None, color: str = MUTED) -> html.Div:
    children = [html.P(message, style={"marginBottom": "1rem", "color": color})]
    if hint:
        children.append(html.P(hint, style={"fontSize": ".8rem"}))
    return html.Div(children, style=_PANEL_STYLE)


def idle_panel(message: str | None = None) -> html.Div:
    return message_panel(message or "请选择时间段查看数据")


def empty_panel(message: str | None = None) -> html.Div:
    return message_panel(message or "所选时间段内无数据", "请选择其他时间段重试")


def error_panel(message: str) -> html.Div:
    return message_panel(message, "请选择其他时间段重试", color=DANGER)


def placeholder_panel() -> html.Div:
    return message_panel("该图表类型正在开发中")


def retry_panel(message: str, view: str) -> html.Div:
    """Inline table error with a retry button (pattern-matched per view)."""
    return html.Div(
        [
            html.P(message, style={"color": DANGER, "margin": 0}),
            html.Button(
                "重试",
                id={"type": f"{view}-retry", "index": 0},
                n_clicks=0,
                style={
                    "marginLeft": "16px",
                    "fontSize": ".8rem",
                    "fontWeight": "600",
                    "color": ACCENT,
                    "background": "transparent",
                    "border": f"1px solid {ACCENT}",
                    "borderRadius": "4px",
                    "padding": "4px 12px",
                    "cursor": "pointer",
                },
            ),
        ],
        style={
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "center",
            "height": "240px",
        },
    )
