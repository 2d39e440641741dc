"""Redis client factory."""

from __future__ import annotations

import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)


def create_redis_client(
    url: Optional[str] = None,
    socket_timeout: Optional[float] = None,
) -> redis.Redis:
    """Create a Redis client (URL from config if not provided).

    Responses are decoded to str. Connection is lazy: the first command
    opens it, and connection errors surface from that command.
    """
    if url is None:
        from ..config import get_config

        config = get_config()
        url = config.redis_url
        if socket_timeout is None:
            socket_timeout = config.socket_timeout

    logger.debug(f"Creating Redis client for {url}")
    return redis.Redis.from_url(
        url,
        decode_responses=True,
        socket_timeout=socket_timeout,
    )
