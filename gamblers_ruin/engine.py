"""High-level orchestration for the Gambler's Ruin engine."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from . import config
from .core.batch import ProgressCallback, run_batch
from .core.convergence import compute_convergence_series, compute_display_range
from .core.simulation_validation import validate_batch
from .core.theory import compute_ruin_probability
from .core.validator import validate_parameters, validate_ui_ranges
from .models.parameters import RuinParameters
from .models.results import RuinAnalysis

LOGGER = logging.getLogger(__name__)


class RuinEngine:
    """Primary entry point for configuring and running ruin simulations."""

    def __init__(self) -> None:
        self._parameters: Optional[RuinParameters] = None

    # -------------------------------------------------------------- Parameters
    def set_parameters(
        self,
        initial_capital: int,
        target_capital: int,
        success_probability: float,
        simulation_count: int,
        *,
        max_steps: int = config.MAX_STEPS,
        retained_paths: int = config.RETAINED_PATHS,
        progress_interval: int = config.PROGRESS_INTERVAL,
        random_seed: Optional[int] = config.RANDOM_SEED,
    ) -> RuinParameters:
        """Build, validate and store the parameters for the next run."""
        params = RuinParameters(
            initial_capital=initial_capital,
            target_capital=target_capital,
            success_probability=float(success_probability),
            simulation_count=simulation_count,
            max_steps=max_steps,
            retained_paths=retained_paths,
            progress_interval=progress_interval,
            random_seed=random_seed,
        )
        self.use_parameters(params)
        return params

    def use_parameters(self, params: RuinParameters) -> None:
        """Store a pre-built parameter bundle after validating it."""
        validate_parameters(params)
        for warning in validate_ui_ranges(params):
            LOGGER.info("Parameter note: %s", warning)
        self._parameters = params

    @property
    def parameters(self) -> RuinParameters:
        if self._parameters is None:
            raise RuntimeError("Parameters have not been configured.")
        return self._parameters

    # ------------------------------------------------------------------ Theory
    def theoretical_probability(self) -> float:
        """Closed-form probability of reaching the target before ruin."""
        params = self.parameters
        return compute_ruin_probability(
            params.success_probability, params.initial_capital, params.target_capital
        )

    # -------------------------------------------------------------- Execution
    def run_analysis(
        self,
        progress_callback: Optional[ProgressCallback] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> RuinAnalysis:
        """Run the batch and derive the convergence series, display range and checks."""
        params = self.parameters
        theoretical = self.theoretical_probability()
        LOGGER.info(
            "Running %s simulations: capital %s -> %s, p=%.3f",
            params.simulation_count,
            params.initial_capital,
            params.target_capital,
            params.success_probability,
        )

        batch = run_batch(params, rng=rng, progress_callback=progress_callback)
        convergence = compute_convergence_series(batch)
        display_range = compute_display_range(convergence, theoretical)
        validation = validate_batch(batch)
        for warning in validation.warnings:
            LOGGER.warning("Batch validation warning: %s", warning)
        if validation.status != "PASS":
            LOGGER.warning("Batch validation failed: %s", ", ".join(validation.failed_checks))

        LOGGER.info(
            "Empirical success rate %.4f vs theoretical %.4f",
            batch.empirical_probability,
            theoretical,
        )
        return RuinAnalysis(
            parameters=params,
            theoretical_probability=theoretical,
            batch=batch,
            convergence=convergence,
            display_range=display_range,
            validation=validation.to_dict(),
        )


__all__ = ["RuinEngine"]
