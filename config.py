"""
config.py — Shared Constants & Logging Setup
=============================================
Everything tunable lives here so tracers, sessions and the Flask app
agree on the same numbers.

Environment overrides:
    TRACE_LOG_LEVEL   – logging level name (default INFO)
    TRACE_SECRET_KEY  – Flask session secret (default: random per process)
"""

import logging
import os
import secrets
from typing import Dict, List


# ---------------------------------------------------------------------------
# Graph canvas
# ---------------------------------------------------------------------------
GRID_SIZE:          int   = 40       # snap-to-grid spacing, also the weight-by-distance unit
CANVAS_WIDTH:       float = 800
CANVAS_HEIGHT:      float = 500

# ---------------------------------------------------------------------------
# Tree layout
# ---------------------------------------------------------------------------
TREE_ROOT_X:        float = 400
TREE_ROOT_Y:        float = 200
TREE_LEVEL_HEIGHT:  float = 80
TREE_INITIAL_OFFSET: float = 200

# ---------------------------------------------------------------------------
# Bounded queue
# ---------------------------------------------------------------------------
MAX_CAPACITY:       int   = 15
DEFAULT_QUEUE:      List[int] = [10, 20, 30]

# ---------------------------------------------------------------------------
# Memory simulation (synthetic address space)
# ---------------------------------------------------------------------------
STACK_BASE:         int   = 0x7FFF0000
HEAP_BASE:          int   = 0x10000000
WORD_SIZE:          int   = 4
HEAP_BLOCK_SIZE:    int   = 16
NULL_ADDRESS:       str   = "0x000000"

# ---------------------------------------------------------------------------
# Playback speed (multipliers; interval = 1 / multiplier seconds)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, float] = {
    "0.5x": 0.5,
    "1x":   1.0,
    "2x":   2.0,
    "4x":   4.0,
}
DEFAULT_SPEED:      float = 1.0

INFINITY_LABEL:     str   = "∞"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = None) -> None:
    """Root logger setup used by main.py (and anyone embedding the engine)."""
    level = (level or os.environ.get("TRACE_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


class FlaskConfig:
    SECRET_KEY = os.environ.get("TRACE_SECRET_KEY") or secrets.token_hex(32)
