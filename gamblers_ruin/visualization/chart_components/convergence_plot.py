"""Convergence plot of the cumulative win rate against the closed-form value."""

from __future__ import annotations

from typing import Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ...core.convergence import compute_display_range
from ..themes import DEFAULT_THEME


def build_convergence_figure(
    convergence: pd.DataFrame,
    theoretical: float,
    *,
    display_range: Optional[Tuple[float, float]] = None,
    theme: Optional[dict] = None,
) -> go.Figure:
    """
    Build convergence chart for the cumulative success rate across trials.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    df = convergence.sort_values("trial")
    lower, upper = display_range or compute_display_range(df, theoretical)

    figure = go.Figure()

    figure.add_trace(
        go.Scatter(
            x=df["trial"],
            y=df["cumulative_success_rate"],
            mode="lines",
            line=dict(color=palette["win_rate"], width=3),
            name="Cumulative win rate",
            hovertemplate="Trial %{x}<br>Win rate %{y:.1%}<extra></extra>",
        )
    )

    if not df.empty:
        figure.add_trace(
            go.Scatter(
                x=[df["trial"].iloc[0], df["trial"].iloc[-1]],
                y=[theoretical, theoretical],
                mode="lines",
                line=dict(color=palette["theoretical"], width=1, dash="dash"),
                name="Theoretical Probability",
                hovertemplate="Theoretical %{y:.2%}<extra></extra>",
            )
        )

    figure.update_layout(
        template=theme["plotly_template"],
        title="Convergence to Theoretical Probability",
        margin=dict(l=60, r=30, t=60, b=40),
        xaxis=dict(title="Trial"),
        yaxis=dict(title="Cumulative Win Probability", tickformat=".0%", range=[lower, upper]),
        legend=dict(orientation="h", yanchor="top", y=-0.2, xanchor="center", x=0.5),
        hovermode="x unified",
    )

    return figure
