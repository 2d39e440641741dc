"""Top-level Redis key names used by the worker registry."""

from __future__ import annotations

from dataclasses import dataclass

WORKER_KEY = "ResqueWorker"
SCHEDULER_WORKER_KEY = "ResqueSchedulerWorker"
PAUSED_WORKER_KEY = "PausedWorker"


@dataclass(frozen=True)
class RegistryKeys:
    """Names of the three records kept in the store.

    - worker: hash of "host:pid" -> encoded worker args
    - scheduler_worker: string holding the scheduler's "host:pid"
    - paused_worker: set of paused worker identifiers
    """

    worker: str = WORKER_KEY
    scheduler_worker: str = SCHEDULER_WORKER_KEY
    paused_worker: str = PAUSED_WORKER_KEY

    def with_prefix(self, prefix: str) -> RegistryKeys:
        """Return a copy with every key name prefixed."""
        if not prefix:
            return self
        return RegistryKeys(
            worker=prefix + self.worker,
            scheduler_worker=prefix + self.scheduler_worker,
            paused_worker=prefix + self.paused_worker,
        )
