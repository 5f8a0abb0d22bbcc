"""Environment-driven defaults for simulation runs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


MAX_STEPS = _env_int("GAMBLERS_RUIN_MAX_STEPS", 5000)
RETAINED_PATHS = _env_int("GAMBLERS_RUIN_RETAINED_PATHS", 100)
PROGRESS_INTERVAL = _env_int("GAMBLERS_RUIN_PROGRESS_INTERVAL", 50)
RANDOM_SEED = _env_optional_int("GAMBLERS_RUIN_SEED")
LOG_LEVEL = os.environ.get("GAMBLERS_RUIN_LOG_LEVEL", "INFO").upper()
OUTPUT_DIR = Path(os.environ.get("GAMBLERS_RUIN_OUTPUT_DIR", "output"))

# Slider ranges offered by presentation layers; advisory only.
INITIAL_CAPITAL_RANGE: Tuple[int, int] = (10, 100)
TARGET_CAPITAL_RANGE: Tuple[int, int] = (20, 200)
PROBABILITY_RANGE: Tuple[float, float] = (0.40, 0.60)
PROBABILITY_STEP = 0.005
SIMULATION_COUNT_RANGE: Tuple[int, int] = (100, 1000)

DEFAULT_INITIAL_CAPITAL = 50
DEFAULT_TARGET_CAPITAL = 100
DEFAULT_PROBABILITY = 0.48
DEFAULT_SIMULATIONS = 200
