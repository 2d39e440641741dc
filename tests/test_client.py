"""Tests for the Redis client factory."""

from unittest.mock import patch

import redis

import workerstatus.config as config_module
from workerstatus import StatusConfig, create_redis_client


class TestCreateRedisClient:
    """Test create_redis_client()."""

    def test_explicit_url(self):
        """Verify the URL and decoding options reach redis-py."""
        with patch("workerstatus.core.client.redis.Redis.from_url") as from_url:
            client = create_redis_client("redis://cache:6380/3", socket_timeout=2.0)

        from_url.assert_called_once_with(
            "redis://cache:6380/3", decode_responses=True, socket_timeout=2.0
        )
        assert client is from_url.return_value

    def test_url_from_config(self, monkeypatch):
        """Verify URL and timeout fall back to the global config."""
        monkeypatch.setattr(
            config_module,
            "_config",
            StatusConfig(redis_url="redis://from-config:6379/1", socket_timeout=4.0),
        )
        with patch("workerstatus.core.client.redis.Redis.from_url") as from_url:
            create_redis_client()

        from_url.assert_called_once_with(
            "redis://from-config:6379/1", decode_responses=True, socket_timeout=4.0
        )

    def test_returns_lazy_client(self):
        """Verify no connection is needed to build a client."""
        client = create_redis_client("redis://localhost:1/0")
        assert isinstance(client, redis.Redis)
