"""Progress events emitted while a batch is running."""

from __future__ import annotations

from dataclasses import dataclass, field

import time


@dataclass(frozen=True)
class BatchProgressEvent:
    """
    Snapshot of a batch after a fixed number of completed walks.

    The event is meant for progress bars and live dashboards, so it carries
    counts and the running success rate rather than any trajectories.
    """

    completed: int
    total: int
    successes: int
    truncated: int = 0
    timestamp: float = field(default_factory=time.time)

    @property
    def cumulative_success_rate(self) -> float:
        if self.completed <= 0:
            return 0.0
        return self.successes / self.completed

    @property
    def fraction_complete(self) -> float:
        if self.total <= 0:
            return 0.0
        return min(self.completed / self.total, 1.0)


__all__ = ["BatchProgressEvent"]
