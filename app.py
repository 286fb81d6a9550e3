"""
app.py
──────
Partial Discharge Status Monitor — Application Entry Point.

Startup sequence:
  1. Configure logging (root + request trace)
  2. Create Dash app with DARKLY bootstrap theme
  3. Register all callbacks
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from pdmonitor.layout.main import create_layout
from pdmonitor.logging_config import configure_logging

# ── 1. Logging ────────────────────────────────────────────────────────────────
configure_logging()
logger = logging.getLogger("pdmonitor.app")
logger.info("using monitoring API at %s", settings.API_BASE_URL)

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="局放状态监测",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 3. Register callbacks ─────────────────────────────────────────────────────
from pdmonitor.callbacks import charts, detail, navigation, tables  # noqa: E402

navigation.register(app)
tables.register(app)
detail.register(app)
charts.register(app)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
