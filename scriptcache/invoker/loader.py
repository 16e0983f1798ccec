"""ScriptLoader — returns a script's hash, registering it on a cache miss."""

from __future__ import annotations

import logging
from typing import Optional

from scriptcache.cache import HashCache
from scriptcache.client import StoreClient
from scriptcache.exceptions import StoreReplyError, StoreUnavailableError
from scriptcache.registry import ScriptRegistry

__all__ = ["ScriptLoader"]

logger = logging.getLogger(__name__)


class ScriptLoader:
    """
    Cache-or-register for one store client.

    A cache hit costs nothing; a miss costs one SCRIPT LOAD round-trip.
    """

    def __init__(
        self,
        client: StoreClient,
        registry: ScriptRegistry,
        cache: HashCache,
    ) -> None:
        self._client = client
        self._registry = registry
        self._cache = cache

    @property
    def endpoint(self) -> str:
        return self._client.endpoint

    def ensure_loaded(self, script: str, source: Optional[str] = None) -> str:
        """
        Return the store hash of *script*.

        Args:
            script: Script identity (cache key and registry lookup key).
            source: Script body; read from the registry when omitted.

        Raises:
            ScriptNotFoundError   — registry has no such script
            StoreUnavailableError — store unreachable or registration rejected
        """
        endpoint = self._client.endpoint
        sha = self._cache.get(endpoint, script)
        if sha is not None:
            logger.debug("Hash cache hit: %s on %s", script, endpoint)
            return sha

        if source is None:
            source = self._registry.read_source(script)

        logger.debug("Hash cache miss: loading %s into %s", script, endpoint)
        try:
            sha = self._client.script_load(source)
        except StoreReplyError as exc:
            raise StoreUnavailableError(
                f"{endpoint} rejected script {script!r}: {exc.message}"
            ) from exc

        self._cache.put(endpoint, script, sha)
        return sha
