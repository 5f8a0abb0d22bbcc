"""Result data models for simulation batches and full analyses."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from .parameters import RuinParameters


class SimulationOutcome(BaseModel):
    """Outcome of a single simulated walk."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    simulation_id: int = Field(..., ge=1, description="1-based index within the batch")
    reached_target: bool = Field(..., description="True when the final balance reached the target")
    final_balance: int = Field(..., description="Last recorded balance")
    steps: int = Field(..., ge=0, description="Number of bets placed")
    truncated: bool = Field(
        default=False,
        description="True when the step cap stopped the walk before either barrier",
    )
    trajectory: Optional[np.ndarray] = Field(
        default=None,
        description="Full balance history; only kept for the earliest walks of a batch",
    )


class BatchResult(BaseModel):
    """Ordered outcomes of a Monte Carlo batch."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    parameters: InstanceOf[RuinParameters]
    outcomes: List[SimulationOutcome] = Field(
        default_factory=list, description="Outcomes in simulation order (1..N)"
    )

    def __len__(self) -> int:
        return len(self.outcomes)

    def outcome_flags(self) -> np.ndarray:
        """Return 1/0 success flags in simulation order."""
        return np.fromiter(
            (1 if outcome.reached_target else 0 for outcome in self.outcomes),
            dtype=np.int64,
            count=len(self.outcomes),
        )

    @property
    def success_count(self) -> int:
        return int(self.outcome_flags().sum())

    @property
    def truncated_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.truncated)

    @property
    def empirical_probability(self) -> float:
        if not self.outcomes:
            return 0.0
        return self.success_count / len(self.outcomes)

    def retained_trajectories(self) -> List[Tuple[int, np.ndarray]]:
        """Return ``(simulation_id, trajectory)`` pairs for every retained path."""
        return [
            (outcome.simulation_id, outcome.trajectory)
            for outcome in self.outcomes
            if outcome.trajectory is not None
        ]

    def paths_frame(self) -> pd.DataFrame:
        """Return retained trajectories in long format: ``simulation``, ``step``, ``balance``."""
        frames = [
            pd.DataFrame(
                {
                    "simulation": simulation_id,
                    "step": np.arange(trajectory.size),
                    "balance": trajectory,
                }
            )
            for simulation_id, trajectory in self.retained_trajectories()
        ]
        if not frames:
            return pd.DataFrame(columns=["simulation", "step", "balance"])
        return pd.concat(frames, ignore_index=True)

    def outcomes_frame(self) -> pd.DataFrame:
        """Return one row per simulated walk without trajectories."""
        rows = [
            {
                "simulation": outcome.simulation_id,
                "reached_target": outcome.reached_target,
                "final_balance": outcome.final_balance,
                "steps": outcome.steps,
                "truncated": outcome.truncated,
            }
            for outcome in self.outcomes
        ]
        return pd.DataFrame(
            rows,
            columns=["simulation", "reached_target", "final_balance", "steps", "truncated"],
        )


class RuinAnalysis(BaseModel):
    """Everything a presentation layer needs after one run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    parameters: InstanceOf[RuinParameters]
    theoretical_probability: float = Field(..., ge=0.0, le=1.0)
    batch: BatchResult
    convergence: pd.DataFrame = Field(
        ..., description="Columns ['trial', 'cumulative_success_rate']"
    )
    display_range: Tuple[float, float]
    validation: Dict[str, Any] = Field(default_factory=dict)

    def summary(self) -> Dict[str, Any]:
        """Return headline figures for display."""
        empirical = self.batch.empirical_probability
        return {
            **self.parameters.to_metadata(),
            "theoretical_probability": self.theoretical_probability,
            "theoretical_ruin_probability": 1.0 - self.theoretical_probability,
            "empirical_probability": empirical,
            "absolute_error": abs(empirical - self.theoretical_probability),
            "successes": self.batch.success_count,
            "truncated_walks": self.batch.truncated_count,
            "validation_status": self.validation.get("status"),
        }


__all__ = ["BatchResult", "RuinAnalysis", "SimulationOutcome"]
