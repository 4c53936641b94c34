"""
app.py
──────
Asset Reliability Monitor — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Build the datasets (asset history from DATA_PATH or simulated,
     shift production records simulated)
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks with the datasets they render
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.generator import GeneratorConfig
from config.settings import settings
from src.data.simulator import generate_operational_data
from src.data.store import load_dataset
from src.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── 2. Datasets (owned here, handed to the callbacks) ─────────────────────────
logger.info("Building reliability datasets...")
asset_records = load_dataset()
operational_records = generate_operational_data(
    settings.SIMULATION_SEED,
    config=GeneratorConfig(horizon_days=settings.HORIZON_DAYS),
)
logger.info(f"Datasets ready: {len(asset_records)} asset records, {len(operational_records)} shift records")

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Confiabilidad de Activos",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import navigation, production, reliability  # noqa: E402

navigation.register(app, asset_records, operational_records)
reliability.register(app, asset_records)
production.register(app, operational_records)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
