"""Parameter bundle for a Gambler's Ruin batch run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from .. import config


@dataclass(frozen=True)
class RuinParameters:
    """Inputs for one batch run.

    Instances are immutable so a batch always sees the parameters it started
    with. Validation lives in ``core.validator`` and runs at batch entry.
    """

    initial_capital: int
    target_capital: int
    success_probability: float
    simulation_count: int
    max_steps: int = config.MAX_STEPS
    retained_paths: int = config.RETAINED_PATHS
    progress_interval: int = config.PROGRESS_INTERVAL
    random_seed: Optional[int] = config.RANDOM_SEED

    @property
    def failure_probability(self) -> float:
        return 1.0 - self.success_probability

    def with_seed(self, seed: Optional[int]) -> "RuinParameters":
        """Return a copy with the supplied random seed."""
        return replace(self, random_seed=seed)

    def to_metadata(self) -> Dict[str, object]:
        """Serialise into a plain dictionary for display or export."""
        return {
            "initial_capital": int(self.initial_capital),
            "target_capital": int(self.target_capital),
            "success_probability": float(self.success_probability),
            "simulation_count": int(self.simulation_count),
            "max_steps": int(self.max_steps),
            "retained_paths": int(self.retained_paths),
            "progress_interval": int(self.progress_interval),
            "random_seed": self.random_seed,
        }

    @classmethod
    def from_metadata(cls, metadata: Dict[str, object]) -> "RuinParameters":
        """Rehydrate parameters from a metadata dictionary."""
        seed = metadata.get("random_seed")
        return RuinParameters(
            initial_capital=int(metadata.get("initial_capital", config.DEFAULT_INITIAL_CAPITAL)),
            target_capital=int(metadata.get("target_capital", config.DEFAULT_TARGET_CAPITAL)),
            success_probability=float(metadata.get("success_probability", config.DEFAULT_PROBABILITY)),
            simulation_count=int(metadata.get("simulation_count", config.DEFAULT_SIMULATIONS)),
            max_steps=int(metadata.get("max_steps", config.MAX_STEPS)),
            retained_paths=int(metadata.get("retained_paths", config.RETAINED_PATHS)),
            progress_interval=int(metadata.get("progress_interval", config.PROGRESS_INTERVAL)),
            random_seed=int(seed) if seed is not None else None,
        )


__all__ = ["RuinParameters"]
