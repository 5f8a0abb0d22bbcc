"""Visualization helpers for ruin simulation results."""

from .chart_components import build_convergence_figure, build_path_figure
from .themes import DARK_THEME, DEFAULT_THEME, LIGHT_THEME

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "build_convergence_figure",
    "build_path_figure",
]
