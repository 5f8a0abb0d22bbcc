"""Running success-rate series and its display range."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..models.results import BatchResult

DISPLAY_MARGIN = 0.05


def compute_convergence_series(batch: Union[BatchResult, Sequence[int]]) -> pd.DataFrame:
    """
    Cumulative success rate after each trial, in simulation order.

    Accepts a ``BatchResult`` or a plain sequence of 1/0 outcome flags and
    returns a dataframe with columns ``trial`` (1-based) and
    ``cumulative_success_rate``.
    """
    if isinstance(batch, BatchResult):
        flags = batch.outcome_flags()
    else:
        flags = np.asarray(list(batch), dtype=np.int64)
    trials = np.arange(1, flags.size + 1)
    return pd.DataFrame(
        {
            "trial": trials,
            "cumulative_success_rate": np.cumsum(flags) / trials,
        }
    )


def compute_display_range(
    series: Union[pd.DataFrame, Sequence[float]],
    theoretical: float,
    *,
    margin: float = DISPLAY_MARGIN,
) -> Tuple[float, float]:
    """Return a y-axis interval covering the series and the theoretical value, clamped to [0, 1]."""
    if isinstance(series, pd.DataFrame):
        values = series["cumulative_success_rate"].to_numpy(dtype=float)
    else:
        values = np.asarray(list(series), dtype=float)
    extent = np.append(values, float(theoretical))
    lower = max(0.0, float(extent.min()) - margin)
    upper = min(1.0, float(extent.max()) + margin)
    return lower, upper


__all__ = ["compute_convergence_series", "compute_display_range"]
