"""Single bounded random walk between two absorbing barriers."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .. import config


def simulate_one_walk(
    i0: int,
    N: int,
    p: float,
    max_steps: int = config.MAX_STEPS,
    *,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Simulate one ±1 walk from ``i0`` until it hits 0, reaches ``N`` or runs out of steps.

    The returned trajectory holds the starting balance followed by the
    balance after every bet, so its length is at most ``max_steps + 1``.
    Exactly ``max_steps`` uniform draws are taken from ``rng`` per walk,
    which keeps a seeded batch reproducible regardless of where walks stop.
    """
    increments = np.where(rng.random(max_steps) < p, 1, -1).astype(np.int64)
    balances = np.empty(max_steps + 1, dtype=np.int64)
    balances[0] = i0
    np.cumsum(increments, out=balances[1:])
    balances[1:] += i0

    absorbed = np.flatnonzero((balances[1:] <= 0) | (balances[1:] >= N))
    if absorbed.size:
        return balances[: absorbed[0] + 2].copy()
    return balances


def classify_walk(trajectory: np.ndarray, N: int) -> Tuple[bool, bool]:
    """
    Return ``(reached_target, truncated)`` for a finished trajectory.

    A walk stopped by the step cap sits strictly between the barriers and
    counts as a failure.
    """
    final = int(trajectory[-1])
    reached_target = final >= N
    truncated = 0 < final < N
    return reached_target, truncated


__all__ = ["classify_walk", "simulate_one_walk"]
