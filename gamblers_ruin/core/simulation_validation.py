"""Sanity checks for finished simulation batches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from ..models.results import BatchResult


@dataclass
class ValidationResult:
    """Basic container for validation outcomes."""

    status: str
    failed_checks: Sequence[str]
    warnings: Sequence[str]

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "failed_checks": list(self.failed_checks),
            "warnings": list(self.warnings),
        }


def validate_batch(batch: BatchResult) -> ValidationResult:
    """Check outcome counts, retention and step structure of a batch."""
    failed: list[str] = []
    warnings: list[str] = []
    params = batch.parameters

    if len(batch.outcomes) != params.simulation_count:
        failed.append("outcome_count_mismatch")

    ids = [outcome.simulation_id for outcome in batch.outcomes]
    if ids != list(range(1, len(ids) + 1)):
        failed.append("simulation_order")

    for outcome in batch.outcomes:
        trajectory = outcome.trajectory
        if trajectory is None:
            if outcome.simulation_id <= params.retained_paths:
                failed.append("missing_retained_path")
                break
            continue
        if outcome.simulation_id > params.retained_paths:
            failed.append("path_retained_beyond_cap")
            break
        if trajectory.size < 2 or trajectory.size > params.max_steps + 1:
            failed.append("trajectory_length")
            break
        if int(trajectory[0]) != params.initial_capital:
            failed.append("trajectory_start")
            break
        if not np.all(np.abs(np.diff(trajectory)) == 1):
            failed.append("non_unit_step")
            break

    if batch.truncated_count:
        warnings.append("truncated_walks_present")
    if batch.outcomes:
        successes = batch.success_count
        if successes == 0:
            warnings.append("no_successes")
        elif successes == len(batch.outcomes):
            warnings.append("no_failures")

    status = "PASS" if not failed else "FAIL"
    return ValidationResult(status=status, failed_checks=failed, warnings=warnings)


__all__ = ["ValidationResult", "validate_batch"]
