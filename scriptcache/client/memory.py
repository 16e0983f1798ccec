"""
MemoryStoreClient — deterministic no-network stub, for unit tests and demos.

Behaves like Redis where the cache can observe it: hashes are the SHA-1 hex
digest of the source, loading is idempotent, and calling an unknown hash
answers with a NOSCRIPT error reply. Script logic is supplied as Python
callables keyed by source text.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Callable, Optional

from scriptcache.exceptions import StoreReplyError

from .base import StoreClient

__all__ = ["MemoryStoreClient", "NOSCRIPT_REPLY"]

logger = logging.getLogger(__name__)

NOSCRIPT_REPLY = "NOSCRIPT No matching script. Please use EVAL."

Handler = Callable[..., Any]


class MemoryStoreClient(StoreClient):
    """
    Parameters
    ----------
    endpoint : identity reported to the cache (default "memory://")
    handlers : {source text: callable(*args)}; a handler may raise
               StoreReplyError to simulate a script error. Scripts without a
               handler return their args as a list.
    """

    def __init__(
        self,
        endpoint: str = "memory://",
        handlers: Optional[dict[str, Handler]] = None,
    ) -> None:
        self._endpoint = endpoint
        self.handlers: dict[str, Handler] = dict(handlers or {})
        self._scripts: dict[str, str] = {}
        self.load_calls = 0
        self.eval_calls = 0

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @staticmethod
    def sha_of(source: str) -> str:
        return hashlib.sha1(source.encode("utf-8")).hexdigest()

    def script_load(self, source: str) -> str:
        self.load_calls += 1
        sha = self.sha_of(source)
        self._scripts[sha] = source
        return sha

    def evalsha(self, sha: str, *args: Any) -> Any:
        self.eval_calls += 1
        source = self._scripts.get(sha)
        if source is None:
            raise StoreReplyError(NOSCRIPT_REPLY)
        handler = self.handlers.get(source)
        if handler is None:
            return list(args)
        return handler(*args)

    def script_flush(self) -> None:
        logger.debug("Flushing %d script(s) from %s", len(self._scripts), self._endpoint)
        self._scripts.clear()

    def is_loaded(self, sha: str) -> bool:
        return sha in self._scripts
