"""Monte Carlo batch execution over independent random walks."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

import numpy as np

from ..models.parameters import RuinParameters
from ..models.progress import BatchProgressEvent
from ..models.results import BatchResult, SimulationOutcome
from .random_walk import classify_walk, simulate_one_walk
from .validator import validate_parameters

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[BatchProgressEvent], None]


class BatchRunner:
    """Run a batch of walks, yielding progress snapshots along the way.

    Parameters are validated on construction so an invalid request is
    rejected before any walk is simulated. ``iter_progress`` is a generator;
    once it is exhausted the finished batch is available from ``result``.
    """

    def __init__(self, params: RuinParameters, rng: Optional[np.random.Generator] = None) -> None:
        validate_parameters(params)
        self.params = params
        self._rng = rng if rng is not None else np.random.default_rng(params.random_seed)
        self._result: Optional[BatchResult] = None
        self._started = False

    # ------------------------------------------------------------------ status
    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> BatchResult:
        if self._result is None:
            raise RuntimeError("BatchRunner has not finished its batch.")
        return self._result

    # ------------------------------------------------------------------ control
    def iter_progress(self) -> Iterator[BatchProgressEvent]:
        """Simulate every walk in order, yielding an event every ``progress_interval`` walks."""
        if self._started:
            raise RuntimeError("BatchRunner instances run a single batch.")
        self._started = True

        params = self.params
        total = params.simulation_count
        outcomes: List[SimulationOutcome] = []
        successes = 0
        truncated_total = 0

        for sim_index in range(1, total + 1):
            trajectory = simulate_one_walk(
                params.initial_capital,
                params.target_capital,
                params.success_probability,
                max_steps=params.max_steps,
                rng=self._rng,
            )
            reached_target, truncated = classify_walk(trajectory, params.target_capital)
            successes += int(reached_target)
            truncated_total += int(truncated)
            outcomes.append(
                SimulationOutcome(
                    simulation_id=sim_index,
                    reached_target=reached_target,
                    final_balance=int(trajectory[-1]),
                    steps=int(trajectory.size - 1),
                    truncated=truncated,
                    trajectory=trajectory if sim_index <= params.retained_paths else None,
                )
            )

            if sim_index % params.progress_interval == 0 or sim_index == total:
                LOGGER.debug("Simulation %s/%s complete (%s successes)", sim_index, total, successes)
                if sim_index == total:
                    self._result = BatchResult(parameters=params, outcomes=outcomes)
                    if truncated_total:
                        LOGGER.info(
                            "%s of %s walks hit the %s-step cap and were recorded as failures",
                            truncated_total,
                            total,
                            params.max_steps,
                        )
                yield BatchProgressEvent(
                    completed=sim_index,
                    total=total,
                    successes=successes,
                    truncated=truncated_total,
                )

    def run(self, progress_callback: Optional[ProgressCallback] = None) -> BatchResult:
        """Drain ``iter_progress`` and return the finished batch."""
        for event in self.iter_progress():
            if progress_callback:
                try:
                    progress_callback(event)
                except Exception as exc:
                    LOGGER.warning("Progress callback failed at %s/%s: %s", event.completed, event.total, exc)
        return self.result


def run_batch(
    params: RuinParameters,
    rng: Optional[np.random.Generator] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> BatchResult:
    """Run ``params.simulation_count`` independent walks and collect their outcomes in order."""
    return BatchRunner(params, rng).run(progress_callback)


__all__ = ["BatchRunner", "ProgressCallback", "run_batch"]
