"""
config/settings.py
──────────────────
Dashboard settings read from environment variables at import time.

The metrics generator never reads these directly; app.py and the store
pass them in as arguments.
"""
import os
from dataclasses import dataclass


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    # Dev server
    DEBUG: bool = _flag("DEBUG", "true")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8050"))

    # Asset history JSON; empty or unreadable → simulated history
    DATA_PATH: str = os.getenv("DATA_PATH", "")

    # Simulation
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    HORIZON_DAYS: int = int(os.getenv("HORIZON_DAYS", "365"))

    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "es")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
