"""Reusable Plotly chart components for ruin simulations."""

from .convergence_plot import build_convergence_figure
from .path_plot import build_path_figure

__all__ = ["build_convergence_figure", "build_path_figure"]
