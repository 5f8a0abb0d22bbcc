"""Closed-form absorption probabilities for the Gambler's Ruin walk."""

from __future__ import annotations

from .validator import validate_capitals, validate_probability


def compute_ruin_probability(p: float, i: int, N: int) -> float:
    """
    Probability that a walk started at ``i`` reaches ``N`` before 0.

    Parameters
    ----------
    p:
        Per-bet probability of winning one unit, strictly inside (0, 1).
    i:
        Starting capital, ``0 < i < N``.
    N:
        Target capital (upper absorbing barrier).

    Notes
    -----
    The formula assumes an unbounded number of bets, so it ignores the step
    cap applied by the simulator. When ``r = (1 - p) / p`` exceeds 1 the
    ratio is rewritten in powers of ``1 / r`` so large ``N`` underflows
    towards 0 instead of overflowing.
    """
    validate_probability(p)
    validate_capitals(i, N)
    if p == 0.5:
        return i / N
    ratio = (1.0 - p) / p
    if ratio > 1.0:
        value = (ratio ** -(N - i) - ratio**-N) / (1.0 - ratio**-N)
    else:
        value = (1.0 - ratio**i) / (1.0 - ratio**N)
    return float(min(max(value, 0.0), 1.0))


def compute_ruin_complement(p: float, i: int, N: int) -> float:
    """Probability of hitting 0 before ``N`` (the risk of ruin)."""
    return 1.0 - compute_ruin_probability(p, i, N)


__all__ = ["compute_ruin_complement", "compute_ruin_probability"]
