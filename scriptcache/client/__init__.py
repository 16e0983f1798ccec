"""
Store clients — the remote side of the script cache.

A client exposes SCRIPT LOAD / EVALSHA / SCRIPT FLUSH and reports failures
as StoreUnavailableError (transport) or StoreReplyError (error reply text).
"""

from .base import StoreClient
from .factory import connect
from .memory import MemoryStoreClient, NOSCRIPT_REPLY
from .redis_client import RedisStoreClient

__all__ = [
    "StoreClient",
    "connect",
    "MemoryStoreClient",
    "NOSCRIPT_REPLY",
    "RedisStoreClient",
]
