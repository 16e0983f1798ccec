"""
HashCache — in-memory map of (endpoint, script) to the store's script hash.

Usage::

    cache = HashCache()

    sha = cache.get("redis://localhost:6379/0", "/app/lua/save.lua")
    if sha is None:
        sha = client.script_load(source)
        cache.put("redis://localhost:6379/0", "/app/lua/save.lua", sha)

    # Store reported NOSCRIPT
    cache.invalidate("redis://localhost:6379/0", "/app/lua/save.lua")
"""

import logging
import threading
from typing import Optional

from scriptcache.cache.models import CacheKey, ScriptHash

__all__ = ["HashCache", "shared_cache"]

logger = logging.getLogger(__name__)


class HashCache:
    """
    Thread-safe mapping of CacheKey → ScriptHash.

    The lock only guards dictionary access; it is never held while talking to
    the store. An entry is presumed valid until the store says otherwise.
    Two callers racing to put the same key are harmless: registering the same
    source twice yields the same hash.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, ScriptHash] = {}
        self._lock = threading.Lock()

    def get(self, endpoint: str, script: str) -> Optional[ScriptHash]:
        """Return the cached hash, or None on a miss."""
        with self._lock:
            return self._entries.get(CacheKey(endpoint, script))

    def put(self, endpoint: str, script: str, sha: ScriptHash) -> None:
        """Store (or overwrite) the hash for *script* on *endpoint*."""
        with self._lock:
            self._entries[CacheKey(endpoint, script)] = sha
        logger.debug("Cached %s for %s on %s", sha, script, endpoint)

    def invalidate(self, endpoint: str, script: str) -> bool:
        """
        Drop a single entry.

        Returns:
            True if an entry was removed, False if none was cached.
        """
        with self._lock:
            removed = self._entries.pop(CacheKey(endpoint, script), None)
        return removed is not None

    def invalidate_endpoint(self, endpoint: str) -> int:
        """
        Drop every entry belonging to *endpoint*; other endpoints are untouched.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            stale = [k for k in self._entries if k.endpoint == endpoint]
            for key in stale:
                del self._entries[key]
        return len(stale)

    def scripts(self, endpoint: str) -> list[str]:
        """Script identities currently cached for *endpoint*."""
        with self._lock:
            return sorted(k.script for k in self._entries if k.endpoint == endpoint)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


_shared: Optional[HashCache] = None
_shared_lock = threading.Lock()


def shared_cache() -> HashCache:
    """Return the process-wide HashCache, creating it on first use."""
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = HashCache()
        return _shared
