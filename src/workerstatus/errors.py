"""Exceptions raised by workerstatus."""


class WorkerStatusError(Exception):
    """Base class for workerstatus errors."""


class MalformedWorkerIdError(WorkerStatusError, ValueError):
    """Worker identifier is not of the form ``host:pid[:queue]``."""

    def __init__(self, worker_id: str):
        self.worker_id = worker_id
        super().__init__(
            f"Malformed worker identifier {worker_id!r}: expected 'host:pid[:queue]'"
        )


class WorkerArgsError(WorkerStatusError, TypeError):
    """Worker args hold a value that would not read back unchanged."""

    def __init__(self, path: str, value: object, reason: str = "is not supported"):
        self.path = path
        self.value = value
        super().__init__(
            f"Worker args value at {path} of type {type(value).__name__} {reason}: "
            "use dict with str keys, list, str, int, float, bool or None"
        )
