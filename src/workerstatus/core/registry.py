"""
Worker Status Registry.

Keeps the bookkeeping of a Resque-style worker pool in Redis:
- worker registry: hash of "host:pid" -> encoded worker args
- scheduler pointer: "host:pid" of the fleet-wide scheduler worker
- paused workers: set of worker identifiers

Every method is one or a few round-trips to the store. Sequences of
commands are not atomic; concurrent callers see last-writer-wins.
"""

from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .codec import decode_args, encode_args, to_text
from .identity import WorkerIdentity, format_worker_key, split_worker_key
from .keys import RegistryKeys

if TYPE_CHECKING:
    import redis

    from ..config import StatusConfig

logger = logging.getLogger(__name__)


class WorkerRegistry:
    """Registry of running, paused and scheduler workers.

    The store client must offer the redis-py commands get, set, delete,
    hset, hgetall, hdel, hkeys, sadd, srem, sismember and smembers.
    Store errors propagate unchanged; nothing is retried here.
    """

    def __init__(
        self,
        client: "redis.Redis",
        keys: Optional[RegistryKeys] = None,
        hostname: Optional[str] = None,
    ):
        self.client = client
        self.keys = keys or RegistryKeys()
        self.hostname = hostname or socket.gethostname()
        if ":" in self.hostname:
            raise ValueError(
                f"Host name {self.hostname!r} contains ':', which separates host from pid"
            )

    @classmethod
    def from_config(
        cls,
        config: Optional["StatusConfig"] = None,
        client: Optional["redis.Redis"] = None,
    ) -> WorkerRegistry:
        """Build a registry from configuration (global config if not provided)."""
        if config is None:
            from ..config import get_config

            config = get_config()
        if client is None:
            from .client import create_redis_client

            client = create_redis_client(config.redis_url, config.socket_timeout)

        keys = RegistryKeys(
            worker=config.worker_key,
            scheduler_worker=config.scheduler_worker_key,
            paused_worker=config.paused_worker_key,
        ).with_prefix(config.key_prefix)
        return cls(client, keys=keys, hostname=config.hostname)

    def _worker_key(self, pid: Union[int, str]) -> str:
        return format_worker_key(self.hostname, pid)

    # ===================
    # Workers
    # ===================

    def add_worker(self, pid: Union[int, str], args: Any) -> bool:
        """Save a worker's args, used when restarting the worker.

        `args` must be JSON-native (dict with str keys, list, str, int,
        float, bool, None) so get_workers returns an equal value. A pid
        and its decimal string name the same worker.

        Returns False only if the client reports the write as failed.

        Raises:
            WorkerArgsError: if `args` holds any other type
        """
        field = self._worker_key(pid)
        result = self.client.hset(self.keys.worker, field, encode_args(args))
        logger.debug(f"Saved worker {field}")
        return result is not False

    def get_workers(self) -> Dict[Union[int, str], Any]:
        """Return the args of every worker started on this host, by pid.

        Workers registered from other hosts share the hash but are left out.
        """
        workers: Dict[Union[int, str], Any] = {}
        for name, blob in self.client.hgetall(self.keys.worker).items():
            name = to_text(name)
            host, pid = split_worker_key(name)
            if host != self.hostname:
                continue
            workers[pid] = decode_args(blob, name)
        return workers

    def remove_worker(self, pid: Union[int, str]) -> None:
        """Forget a worker's args. Removing an unknown worker is a no-op."""
        field = self._worker_key(pid)
        self.client.hdel(self.keys.worker, field)
        logger.debug(f"Removed worker {field}")

    def clear_workers(self) -> None:
        """Clear all saved worker args and the paused workers list."""
        self.client.delete(self.keys.worker)
        self.client.delete(self.keys.paused_worker)
        logger.info("Cleared all workers and paused workers")

    # ===================
    # Scheduler worker
    # ===================

    def register_scheduler_worker(self, pid: Union[int, str]) -> bool:
        """Mark this host's process `pid` as the scheduler worker.

        Overwrites any previous scheduler; there is no conflict detection.
        """
        worker_key = self._worker_key(pid)
        result = bool(self.client.set(self.keys.scheduler_worker, worker_key))
        logger.info(f"Registered scheduler worker {worker_key}")
        return result

    def is_scheduler_worker(self, worker: Union[str, WorkerIdentity, Any]) -> bool:
        """Test if a worker ("host:pid:queue" or an object printing as one)
        is the scheduler worker.

        Raises:
            MalformedWorkerIdError: if the identifier has no pid segment
        """
        identity = WorkerIdentity.parse(worker)
        scheduler = to_text(self.client.get(self.keys.scheduler_worker))
        return identity.worker_key == scheduler

    def is_running_scheduler_worker(self) -> bool:
        """Check if the scheduler worker is registered and still running.

        A scheduler pointer naming a worker absent from the registry is
        outdated and is removed.
        """
        workers = [to_text(name) for name in self.client.hkeys(self.keys.worker)]
        scheduler = to_text(self.client.get(self.keys.scheduler_worker))

        if scheduler is None:
            return False
        if scheduler in workers:
            return True

        logger.warning(f"Scheduler worker {scheduler} is not running, unregistering it")
        self.unregister_scheduler_worker()
        return False

    def unregister_scheduler_worker(self) -> bool:
        """Unregister the scheduler worker.

        Returns True if a scheduler worker existed and was removed.
        """
        return self.client.delete(self.keys.scheduler_worker) > 0

    # ===================
    # Paused workers
    # ===================

    def set_paused_worker(
        self, worker: Union[str, WorkerIdentity, Any], paused: bool = True
    ) -> None:
        """Mark a worker as paused, or as active again with paused=False."""
        name = str(worker)
        if paused:
            self.client.sadd(self.keys.paused_worker, name)
        else:
            self.client.srem(self.keys.paused_worker, name)
        logger.debug(f"Worker {name} paused={paused}")

    def is_paused_worker(self, worker: Union[str, WorkerIdentity, Any]) -> bool:
        return bool(self.client.sismember(self.keys.paused_worker, str(worker)))

    def get_paused_worker(self) -> List[str]:
        """Return the names of all paused workers (empty list if none)."""
        members = self.client.smembers(self.keys.paused_worker) or ()
        return [to_text(member) for member in members]
