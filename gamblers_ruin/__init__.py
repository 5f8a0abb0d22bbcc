"""Gambler's Ruin simulation and estimation engine."""

from .core.batch import BatchRunner, run_batch
from .core.convergence import compute_convergence_series, compute_display_range
from .core.theory import compute_ruin_probability
from .core.validator import InvalidParameters
from .engine import RuinEngine
from .models.parameters import RuinParameters
from .models.results import BatchResult, RuinAnalysis, SimulationOutcome

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "BatchRunner",
    "InvalidParameters",
    "RuinAnalysis",
    "RuinEngine",
    "RuinParameters",
    "SimulationOutcome",
    "compute_convergence_series",
    "compute_display_range",
    "compute_ruin_probability",
    "run_batch",
]
