"""Input validation utilities."""

from __future__ import annotations

import numbers
from typing import List

from .. import config
from ..models.parameters import RuinParameters


class InvalidParameters(ValueError):
    """Raised when run parameters cannot describe a valid Gambler's Ruin process."""


def validate_integer(name: str, value: object) -> None:
    """Ensure ``value`` is an integral number; floats and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameters(f"{name} must be an integer, got {value!r}")


def validate_capitals(initial_capital: int, target_capital: int) -> None:
    """Ensure ``0 < initial_capital < target_capital``."""
    validate_integer("initial_capital", initial_capital)
    validate_integer("target_capital", target_capital)
    if initial_capital <= 0:
        raise InvalidParameters(f"initial_capital must be positive, got {initial_capital}")
    if target_capital <= 0:
        raise InvalidParameters(f"target_capital must be positive, got {target_capital}")
    if initial_capital >= target_capital:
        raise InvalidParameters(
            f"initial_capital ({initial_capital}) must be below target_capital ({target_capital})"
        )


def validate_probability(success_probability: float) -> None:
    """Ensure the per-bet success probability lies strictly inside (0, 1)."""
    if not 0.0 < success_probability < 1.0:
        raise InvalidParameters(
            f"success_probability must lie strictly between 0 and 1, got {success_probability}"
        )


def validate_parameters(params: RuinParameters) -> None:
    """Reject parameters before any simulation work begins."""
    validate_capitals(params.initial_capital, params.target_capital)
    validate_probability(params.success_probability)
    for name in ("simulation_count", "max_steps", "retained_paths", "progress_interval"):
        validate_integer(name, getattr(params, name))
    problems: List[str] = []
    if params.simulation_count <= 0:
        problems.append(f"simulation_count must be positive, got {params.simulation_count}")
    if params.max_steps <= 0:
        problems.append(f"max_steps must be positive, got {params.max_steps}")
    if params.retained_paths < 0:
        problems.append(f"retained_paths cannot be negative, got {params.retained_paths}")
    if params.progress_interval <= 0:
        problems.append(f"progress_interval must be positive, got {params.progress_interval}")
    if problems:
        raise InvalidParameters("; ".join(problems))


def validate_ui_ranges(params: RuinParameters) -> List[str]:
    """Return advisory warnings for inputs outside the interactive slider ranges."""
    warnings: List[str] = []
    checks = [
        ("initial_capital", params.initial_capital, config.INITIAL_CAPITAL_RANGE),
        ("target_capital", params.target_capital, config.TARGET_CAPITAL_RANGE),
        ("success_probability", params.success_probability, config.PROBABILITY_RANGE),
        ("simulation_count", params.simulation_count, config.SIMULATION_COUNT_RANGE),
    ]
    for name, value, (low, high) in checks:
        if not low <= value <= high:
            warnings.append(f"{name}={value} outside usual range [{low}, {high}]")
    return warnings


__all__ = [
    "InvalidParameters",
    "validate_capitals",
    "validate_integer",
    "validate_parameters",
    "validate_probability",
    "validate_ui_ranges",
]
