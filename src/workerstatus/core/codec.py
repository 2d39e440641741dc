"""Encoding of worker args stored in the registry hash.

The blob is opaque to the registry: whatever the caller hands to
add_worker comes back from get_workers. Args are limited to JSON-native
values (dict with str keys, list, str, int, float, bool, None) so that
they read back equal; anything else is rejected before writing.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from ..errors import WorkerArgsError

logger = logging.getLogger(__name__)

_SCALARS = (str, int, float, bool, type(None))


def check_args(args: Any, path: str = "args") -> None:
    """Raise WorkerArgsError for the first value that would not round-trip."""
    if isinstance(args, _SCALARS):
        return
    if isinstance(args, list):
        for i, item in enumerate(args):
            check_args(item, f"{path}[{i}]")
        return
    if isinstance(args, dict):
        for key, value in args.items():
            if not isinstance(key, str):
                raise WorkerArgsError(f"{path} key {key!r}", key, "is not a str key")
            check_args(value, f"{path}[{key!r}]")
        return
    raise WorkerArgsError(path, args)


def encode_args(args: Any) -> str:
    check_args(args)
    return json.dumps(args)


def decode_args(blob: Optional[Union[str, bytes]], worker_key: str = "") -> Any:
    """Decode a stored blob; empty or unreadable blobs decode to None."""
    if blob is None:
        return None
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8")
    if not blob:
        return None
    try:
        return json.loads(blob)
    except ValueError as e:
        logger.warning(f"Could not decode args for worker {worker_key}: {e}")
        return None


def to_text(value: Optional[Union[str, bytes]]) -> Optional[str]:
    """Normalise a store response to str (clients without decode_responses)."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value
