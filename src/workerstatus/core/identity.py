"""Worker identifiers of the form ``host:pid[:queue]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from ..errors import MalformedWorkerIdError


@dataclass(frozen=True)
class WorkerIdentity:
    """A worker as seen by the rest of the fleet."""

    host: str
    pid: str
    queue: Optional[str] = None

    @classmethod
    def parse(cls, worker: Any) -> WorkerIdentity:
        """Parse a worker identifier (or any object whose str() is one).

        Segments after the queue are ignored. At least host and pid are
        required.
        """
        worker_id = str(worker)
        parts = worker_id.split(":")
        if len(parts) < 2:
            raise MalformedWorkerIdError(worker_id)
        queue = parts[2] if len(parts) > 2 else None
        return cls(host=parts[0], pid=parts[1], queue=queue)

    @property
    def worker_key(self) -> str:
        """Field name of this worker in the registry hash."""
        return format_worker_key(self.host, self.pid)

    def __str__(self) -> str:
        if self.queue is None:
            return self.worker_key
        return f"{self.worker_key}:{self.queue}"


def format_worker_key(host: str, pid: Union[int, str]) -> str:
    return f"{host}:{pid}"


def split_worker_key(worker_key: str) -> Tuple[str, Union[int, str]]:
    """Split a registry field into (host, pid) the way WorkerIdentity.parse does.

    Host names cannot contain colons. The pid comes back as int only when
    that int formats back to the same field, so "007" stays a str.
    """
    host, _, pid = worker_key.partition(":")
    if pid.isdigit() and str(int(pid)) == pid:
        return host, int(pid)
    return host, pid
