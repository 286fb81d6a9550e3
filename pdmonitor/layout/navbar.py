"""
pdmonitor/layout/navbar.py
──────────────────────────
Navigation bar with the equipment / sensor list toggle.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"

BRAND = "局放状态智能体诊断系统"

# (link id, label); both links route to "/" and only switch the list view
LIST_VIEW_LINKS = [
    ("nav-equipment", "设备状态"),
    ("nav-device", "传感器状态"),
]


def _brand() -> dbc.NavbarBrand:
    return dbc.NavbarBrand(
        [
            html.Span("⚡", style={"marginRight": "8px", "fontSize": "1.1rem"}),
            html.Span(BRAND, style={"fontWeight": "700", "letterSpacing": ".04em"}),
        ],
        href="/",
        style={"color": ACCENT, "textDecoration": "none"},
    )


def create_navbar() -> dbc.Navbar:
    links = [
        dbc.NavItem(dbc.NavLink(label, href="/", id=link_id, n_clicks=0))
        for link_id, label in LIST_VIEW_LINKS
    ]
    return dbc.Navbar(
        dbc.Container(
            [
                _brand(),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(links, className="ms-auto", navbar=True),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
