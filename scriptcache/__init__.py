"""
scriptcache — hash-addressed script invocation with automatic reload.

Keeps the store's hash for every script it has registered, calls scripts by
hash, reloads them when the store has forgotten them, and turns error
replies into UniqueIndexViolation / ScriptNotLoadedError where they mean
something to the caller.
"""

from scriptcache.cache import HashCache, shared_cache
from scriptcache.client import MemoryStoreClient, RedisStoreClient, StoreClient, connect
from scriptcache.exceptions import (
    ScriptCacheError,
    ScriptNotFoundError,
    ScriptNotLoadedError,
    StoreError,
    StoreReplyError,
    StoreUnavailableError,
    UniqueIndexViolation,
)
from scriptcache.invoker import (
    ErrorTranslator,
    InvokerConfig,
    ScriptInvoker,
    ScriptLoader,
    script,
)
from scriptcache.registry import FileScriptRegistry, InMemoryScriptRegistry

__version__ = "0.1.0"

__all__ = [
    "HashCache",
    "shared_cache",
    "StoreClient",
    "RedisStoreClient",
    "MemoryStoreClient",
    "connect",
    "ScriptCacheError",
    "StoreError",
    "StoreUnavailableError",
    "StoreReplyError",
    "ScriptNotFoundError",
    "ScriptNotLoadedError",
    "UniqueIndexViolation",
    "ErrorTranslator",
    "InvokerConfig",
    "ScriptInvoker",
    "ScriptLoader",
    "script",
    "FileScriptRegistry",
    "InMemoryScriptRegistry",
]
