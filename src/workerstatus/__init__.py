"""
WorkerStatus - shared worker bookkeeping for Resque-style worker pools.

Tracks which workers run on which host, which are paused, and which
process currently acts as the fleet-wide scheduler, all in Redis.

Usage:
    from workerstatus import WorkerRegistry, create_redis_client

    registry = WorkerRegistry(create_redis_client("redis://localhost:6379/0"))
    registry.add_worker(os.getpid(), {"queue": "default", "interval": 5})

    if not registry.is_running_scheduler_worker():
        registry.register_scheduler_worker(os.getpid())
"""

__version__ = "0.1.0"

from .core import (
    RegistryKeys,
    WorkerIdentity,
    WorkerRegistry,
    create_redis_client,
)
from .config import StatusConfig, get_config, setup_logging
from .errors import MalformedWorkerIdError, WorkerArgsError, WorkerStatusError

__all__ = [
    "__version__",
    # Core
    "WorkerRegistry",
    "RegistryKeys",
    "WorkerIdentity",
    "create_redis_client",
    # Config
    "StatusConfig",
    "get_config",
    "setup_logging",
    # Errors
    "WorkerStatusError",
    "MalformedWorkerIdError",
    "WorkerArgsError",
]
