"""Chart geometry, scale domains and data locations."""

from __future__ import annotations

import os
from pathlib import Path

from plotly.colors import qualitative

# ── time range ─────────────────────────────────────────────────────────────────

START_YEAR = 1800
END_YEAR   = 2009

SWEEP_DURATION = 30.0   # seconds for the whole start → end sweep
DEFAULT_FPS    = 24

# ── chart geometry ─────────────────────────────────────────────────────────────

MARGIN: dict[str, float] = {"top": 19.5, "right": 19.5, "bottom": 19.5, "left": 39.5}
WIDTH  = 960 - MARGIN["right"]
HEIGHT = 500 - MARGIN["top"] - MARGIN["bottom"]

# ── scale domains / ranges ─────────────────────────────────────────────────────

INCOME_DOMAIN     = (300.0, 1e5)    # log scale → [0, WIDTH]
LIFE_EXP_DOMAIN   = (10.0, 85.0)    # linear    → [HEIGHT, 0]
POPULATION_DOMAIN = (0.0, 5e8)      # sqrt      → RADIUS_RANGE
RADIUS_RANGE      = (2.0, 40.0)

# d3.schemeCategory10
CATEGORY10: tuple[str, ...] = tuple(qualitative.D3)

# Year-label box (pixels, relative to the plot origin) the scrub overlay covers.
YEAR_LABEL_BOX = (WIDTH - 230.0, HEIGHT - 120.0, 230.0, 100.0)  # x, y, w, h

# ── data location ──────────────────────────────────────────────────────────────

DATA_URL = "https://bost.ocks.org/mike/nations/nations.json"
_LOCAL_PATH = Path(__file__).parent / "data" / "nations.json"


def data_source(offline: bool = False) -> str | Path:
    """NATIONS_DATA if set, else DATA_URL.

    offline: use the bundled excerpt (a handful of nations) instead of the URL.
    """
    env_path = os.environ.get("NATIONS_DATA")
    if env_path:
        return env_path
    return _LOCAL_PATH if offline else DATA_URL
