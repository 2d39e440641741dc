"""
WorkerStatus Core - Redis-backed worker bookkeeping.

Provides:
- WorkerRegistry: running/paused/scheduler state for a worker pool
- RegistryKeys: top-level key names
- WorkerIdentity: "host:pid[:queue]" identifiers
- create_redis_client: Redis client factory
"""

from .client import create_redis_client
from .identity import WorkerIdentity
from .keys import RegistryKeys
from .registry import WorkerRegistry

__all__ = [
    "WorkerRegistry",
    "RegistryKeys",
    "WorkerIdentity",
    "create_redis_client",
]
