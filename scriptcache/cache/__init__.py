"""
cache — process-local store of script hashes, keyed per endpoint.

Public API
──────────
CacheKey      — (endpoint, script) composite key
ScriptHash    — alias for the opaque hash string
HashCache     — thread-safe get / put / invalidate
shared_cache  — lazily created process-wide HashCache
"""

from scriptcache.cache.models import CacheKey, ScriptHash
from scriptcache.cache.hash_cache import HashCache, shared_cache

__all__ = ["CacheKey", "ScriptHash", "HashCache", "shared_cache"]
