"""Single source of truth for dice geometry, fixed category values, and logging."""
from __future__ import annotations

import logging
import os

# ── Dice geometry ───────────────────────────────────────────────────────────
DICE_COUNT = 5
MIN_FACE = 1
MAX_FACE = 6
FACES = tuple(range(MIN_FACE, MAX_FACE + 1))

# C(10, 5): sorted 5-dice multisets over six faces
NUM_DICE_SETS = 252

# ── Fixed category values ───────────────────────────────────────────────────
YATZY_SCORE = 50
SMALL_STRAIGHT_SCORE = 15
LARGE_STRAIGHT_SCORE = 20

SMALL_STRAIGHT_FACES = (1, 2, 3, 4, 5)
LARGE_STRAIGHT_FACES = (2, 3, 4, 5, 6)

# ── Logging ─────────────────────────────────────────────────────────────────
LOG_LEVEL_ENV = "YATZY_SCORE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> str:
    """Log level name from the environment, falling back to WARNING when unset or unknown."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def is_valid_face(value: int) -> bool:
    return MIN_FACE <= value <= MAX_FACE
