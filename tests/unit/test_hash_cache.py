"""
Unit tests for scriptcache/cache/

Coverage plan
─────────────
models.py      → CacheKey equality, hashing, str
hash_cache.py  → get/put/invalidate, per-endpoint isolation,
                 invalidate_endpoint, len/contains, concurrent access,
                 shared_cache singleton
"""

import threading

import pytest

from scriptcache.cache import CacheKey, HashCache, shared_cache

EP_A = "redis://a:6379/0"
EP_B = "redis://b:6379/0"


@pytest.fixture
def cache() -> HashCache:
    return HashCache()


# ─────────────────────────────────────────────────────────────────────────────
# 1. CacheKey
# ─────────────────────────────────────────────────────────────────────────────

class TestCacheKey:

    def test_equal_keys_hash_equal(self):
        assert CacheKey(EP_A, "save.lua") == CacheKey(EP_A, "save.lua")
        assert hash(CacheKey(EP_A, "save.lua")) == hash(CacheKey(EP_A, "save.lua"))

    def test_endpoint_is_part_of_identity(self):
        assert CacheKey(EP_A, "save.lua") != CacheKey(EP_B, "save.lua")

    def test_is_immutable(self):
        key = CacheKey(EP_A, "save.lua")
        with pytest.raises(AttributeError):
            key.script = "other.lua"  # type: ignore[misc]

    def test_str(self):
        assert str(CacheKey(EP_A, "x.lua")) == f"{EP_A}#x.lua"


# ─────────────────────────────────────────────────────────────────────────────
# 2. HashCache
# ─────────────────────────────────────────────────────────────────────────────

class TestHashCache:

    def test_get_miss_returns_none(self, cache):
        assert cache.get(EP_A, "save.lua") is None

    def test_put_then_get(self, cache):
        cache.put(EP_A, "save.lua", "abc")
        assert cache.get(EP_A, "save.lua") == "abc"

    def test_put_overwrites(self, cache):
        cache.put(EP_A, "save.lua", "old")
        cache.put(EP_A, "save.lua", "new")
        assert cache.get(EP_A, "save.lua") == "new"
        assert len(cache) == 1

    def test_invalidate_removes_single_entry(self, cache):
        cache.put(EP_A, "save.lua", "s1")
        cache.put(EP_A, "delete.lua", "d1")
        assert cache.invalidate(EP_A, "save.lua") is True
        assert cache.get(EP_A, "save.lua") is None
        assert cache.get(EP_A, "delete.lua") == "d1"

    def test_invalidate_missing_returns_false(self, cache):
        assert cache.invalidate(EP_A, "nope.lua") is False

    def test_endpoints_are_isolated(self, cache):
        cache.put(EP_A, "save.lua", "sha-a")
        assert cache.get(EP_B, "save.lua") is None
        cache.put(EP_B, "save.lua", "sha-b")
        cache.invalidate(EP_B, "save.lua")
        assert cache.get(EP_A, "save.lua") == "sha-a"

    def test_invalidate_endpoint_leaves_other_endpoints(self, cache):
        cache.put(EP_A, "save.lua", "s")
        cache.put(EP_A, "delete.lua", "d")
        cache.put(EP_B, "save.lua", "s")
        assert cache.invalidate_endpoint(EP_A) == 2
        assert cache.scripts(EP_A) == []
        assert cache.scripts(EP_B) == ["save.lua"]

    def test_contains_and_clear(self, cache):
        cache.put(EP_A, "save.lua", "s")
        assert CacheKey(EP_A, "save.lua") in cache
        cache.clear()
        assert len(cache) == 0

    def test_concurrent_writers_and_readers(self, cache):
        errors = []

        def worker(n: int) -> None:
            try:
                for i in range(200):
                    script = f"s{i % 10}.lua"
                    cache.put(EP_A, script, f"sha{i % 10}")
                    got = cache.get(EP_A, script)
                    assert got in (None, f"sha{i % 10}")
                    if n % 2:
                        cache.invalidate(EP_A, script)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(cache) <= 10


class TestSharedCache:

    def test_returns_same_instance(self):
        assert shared_cache() is shared_cache()
