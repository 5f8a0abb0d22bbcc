"""Spaghetti plot of retained random-walk trajectories."""

from __future__ import annotations

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ...models.results import BatchResult
from ..themes import DEFAULT_THEME


def build_path_figure(
    batch: BatchResult,
    *,
    theme: Optional[dict] = None,
) -> go.Figure:
    """
    Build the bankroll path chart with dashed ruin and target barriers.

    Parameters
    ----------
    batch:
        Finished batch; only outcomes that kept their trajectory are drawn.
    theme:
        Theme dictionary from ``visualization.themes``.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    target = batch.parameters.target_capital
    retained = batch.retained_trajectories()

    figure = go.Figure()

    for simulation_id, trajectory in retained:
        figure.add_trace(
            go.Scatter(
                x=np.arange(trajectory.size),
                y=trajectory,
                mode="lines",
                line=dict(color=palette["path"], width=1),
                opacity=0.4,
                name=f"Walk {simulation_id}",
                hovertemplate="Step %{x}<br>Bankroll $%{y}<extra>%{fullData.name}</extra>",
                showlegend=False,
            )
        )

    figure.add_hline(y=target, line=dict(color=palette["target"], width=2, dash="dash"))
    figure.add_hline(y=0, line=dict(color=palette["ruin"], width=2, dash="dash"))

    figure.update_layout(
        template=theme["plotly_template"],
        title=f"Monte Carlo Paths (First {len(retained)} displayed)",
        margin=dict(l=60, r=30, t=60, b=40),
        xaxis=dict(title="Step"),
        yaxis=dict(title="Bankroll ($)"),
        hovermode="closest",
    )

    return figure
