"""Shared fixtures: an in-memory stand-in for the redis-py client."""

from __future__ import annotations

import pytest

from workerstatus import RegistryKeys, WorkerRegistry


class InMemoryRedis:
    """Subset of redis.Redis used by WorkerRegistry (decode_responses=True)."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = str(value)
        return True

    def delete(self, *keys):
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    def exists(self, key):
        return int(key in self.data)

    def hset(self, key, field, value):
        h = self.data.setdefault(key, {})
        added = field not in h
        h[str(field)] = value
        return int(added)

    def hgetall(self, key):
        return dict(self.data.get(key, {}))

    def hkeys(self, key):
        return list(self.data.get(key, {}))

    def hdel(self, key, *fields):
        h = self.data.get(key, {})
        removed = sum(1 for f in fields if h.pop(f, None) is not None)
        if key in self.data and not h:
            del self.data[key]
        return removed

    def sadd(self, key, *members):
        s = self.data.setdefault(key, set())
        before = len(s)
        s.update(members)
        return len(s) - before

    def srem(self, key, *members):
        s = self.data.get(key, set())
        removed = sum(1 for m in members if m in s)
        s.difference_update(members)
        if key in self.data and not s:
            del self.data[key]
        return removed

    def sismember(self, key, member):
        return int(member in self.data.get(key, set()))

    def smembers(self, key):
        return set(self.data.get(key, set()))


@pytest.fixture
def store():
    return InMemoryRedis()


@pytest.fixture
def hostname():
    """Host name the registry under test runs on."""
    return "alpha"


@pytest.fixture
def registry(store, hostname):
    return WorkerRegistry(store, keys=RegistryKeys().with_prefix("test_"), hostname=hostname)
