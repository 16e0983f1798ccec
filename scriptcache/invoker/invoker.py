"""
ScriptInvoker — runs scripts by hash and recovers from evicted scripts.

Usage::

    client  = connect("redis://localhost:6379/0")
    invoker = ScriptInvoker(client, FileScriptRegistry("lua/"))

    try:
        invoker.invoke("save.lua", 0, payload)
    except UniqueIndexViolation as exc:
        report_conflict(exc.field)

Flow per attempt: hash (cache or SCRIPT LOAD) → EVALSHA → on an error reply,
classify it. NOSCRIPT drops the cached hash and tries again, up to
InvokerConfig.max_attempts evaluations; a unique index violation is raised
as UniqueIndexViolation; anything else is re-raised untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from scriptcache.cache import HashCache, shared_cache
from scriptcache.client import StoreClient
from scriptcache.exceptions import (
    ScriptNotLoadedError,
    StoreReplyError,
    UniqueIndexViolation,
)
from scriptcache.registry import FileScriptRegistry, ScriptRegistry

from .loader import ScriptLoader
from .models import ErrorKind, InvocationRequest, InvokerConfig
from .translator import ErrorTranslator

__all__ = ["ScriptInvoker", "script"]

logger = logging.getLogger(__name__)


class ScriptInvoker:
    """
    Parameters
    ----------
    client     : StoreClient the scripts run on
    registry   : ScriptRegistry providing script source
    cache      : HashCache (None → a private one for this invoker)
    config     : InvokerConfig (None → defaults)
    translator : ErrorTranslator (None → default NOSCRIPT / duplicate rules)
    """

    def __init__(
        self,
        client: StoreClient,
        registry: ScriptRegistry,
        cache: Optional[HashCache] = None,
        config: Optional[InvokerConfig] = None,
        translator: Optional[ErrorTranslator] = None,
    ) -> None:
        self._client = client
        self._registry = registry
        self._cache = cache if cache is not None else HashCache()
        self._config = config or InvokerConfig()
        self._translator = translator or ErrorTranslator()
        self._loader = ScriptLoader(client, registry, self._cache)

    @property
    def cache(self) -> HashCache:
        return self._cache

    @property
    def loader(self) -> ScriptLoader:
        return self._loader

    def _invalidate(self, script: str) -> None:
        endpoint = self._client.endpoint
        if self._config.invalidate_scope == "endpoint":
            dropped = self._cache.invalidate_endpoint(endpoint)
            logger.warning(
                "Store %s lost script %s; dropped %d cached hash(es)",
                endpoint, script, dropped,
            )
        else:
            self._cache.invalidate(endpoint, script)
            logger.warning("Store %s lost script %s; reloading", endpoint, script)

    def load(self, script: str) -> str:
        """Make sure *script* is registered on the store and return its hash."""
        return self._loader.ensure_loaded(self._registry.identity(script))

    def invoke(self, script: str, *args: Any) -> Any:
        """
        Run *script* with *args* and return the store's result unchanged.

        Raises
        ------
        ScriptNotLoadedError  — store kept answering NOSCRIPT for max_attempts tries
        UniqueIndexViolation  — script reported a duplicate unique index value
        StoreReplyError       — any other error reply, re-raised as received
        StoreUnavailableError — transport failure (never retried here)
        ScriptNotFoundError   — registry has no such script
        """
        return self.invoke_request(InvocationRequest(script, tuple(args)))

    def invoke_request(self, request: InvocationRequest) -> Any:
        script = self._registry.identity(request.script)
        max_attempts = self._config.max_attempts

        last_exc: Optional[StoreReplyError] = None

        for attempt in range(1, max_attempts + 1):
            sha = self._loader.ensure_loaded(script)
            try:
                return self._client.evalsha(sha, *request.args)
            except StoreReplyError as exc:
                error = self._translator.classify(exc.message)

                if error.kind is ErrorKind.UNIQUE_CONSTRAINT:
                    raise UniqueIndexViolation(error.field) from exc
                if not error.is_recoverable:
                    raise

                self._invalidate(script)
                last_exc = exc

            if attempt < max_attempts:
                logger.debug("Retry %d/%d for %s", attempt + 1, max_attempts, script)

        # All attempts exhausted
        logger.error(
            "Giving up on %s after %d attempt(s): %s",
            script, max_attempts, last_exc.message if last_exc else "",
        )
        raise ScriptNotLoadedError(
            script, self._client.endpoint, max_attempts
        ) from last_exc


def script(
    client: StoreClient,
    path: str,
    *args: Any,
    registry: Optional[ScriptRegistry] = None,
) -> Any:
    """
    One-call helper: run the script file at *path* on *client*.

    Hashes are kept in the process-wide shared_cache(), so repeated calls
    against the same endpoint skip SCRIPT LOAD.
    """
    invoker = ScriptInvoker(
        client,
        registry or FileScriptRegistry(),
        cache=shared_cache(),
    )
    return invoker.invoke(path, *args)
