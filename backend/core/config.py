"""Centralized configuration for the backend.

Loads environment variables, sets defaults, and exposes constants
used across services and routes.
"""

import os

from dotenv import load_dotenv

from racechart.data.normalize_inputs import resolve_fields
from racechart.visuals.core import constants
from racechart.visuals.core.config import RaceConfig

load_dotenv("env/.env")

ENV = os.getenv("ENV", "local")

# Raw record document: local path or http(s) URL
DATA_SOURCE = os.getenv("DATA_SOURCE", "assets/data.json")

FIELDS = resolve_fields(
    time_field=os.getenv("TIME_FIELD"),
    entity_field=os.getenv("ENTITY_FIELD"),
    value_field=os.getenv("VALUE_FIELD"),
)

CHART_WIDTH = int(os.getenv("CHART_WIDTH", str(constants.width)))
CHART_HEIGHT = int(os.getenv("CHART_HEIGHT", str(constants.height)))
TICK_PERIOD = float(os.getenv("TICK_PERIOD", str(constants.tick_period)))
TRANSITION_DURATION = float(
    os.getenv("TRANSITION_DURATION", str(constants.transition_duration))
)
FPS = int(os.getenv("FPS", str(constants.fps)))
DPI = int(os.getenv("DPI", str(constants.dpi)))
PALETTE = os.getenv("PALETTE", constants.palette)


def race_config(**overrides) -> RaceConfig:
    """Build a ``RaceConfig`` from the environment, with per-request overrides.

    Overrides whose value is None are ignored.
    """
    settings = {
        "width": CHART_WIDTH,
        "height": CHART_HEIGHT,
        "tick_period": TICK_PERIOD,
        "transition_duration": TRANSITION_DURATION,
        "fps": FPS,
        "dpi": DPI,
        "palette": PALETTE,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return RaceConfig(**settings)
