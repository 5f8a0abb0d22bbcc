"""Data models shared by the simulation engine and its presentation layers."""

from .parameters import RuinParameters
from .progress import BatchProgressEvent
from .results import BatchResult, RuinAnalysis, SimulationOutcome

__all__ = [
    "BatchProgressEvent",
    "BatchResult",
    "RuinAnalysis",
    "RuinParameters",
    "SimulationOutcome",
]
