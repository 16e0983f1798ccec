"""Factory function — returns the right StoreClient for a URL."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from .base import StoreClient
from .memory import MemoryStoreClient
from .redis_client import RedisStoreClient

__all__ = ["connect"]

_CLIENT_MAP = {
    "memory": MemoryStoreClient,
    "redis":  RedisStoreClient,
    "rediss": RedisStoreClient,
    "unix":   RedisStoreClient,
}


def connect(url: str, **kwargs: Any) -> StoreClient:
    """
    Return a StoreClient for *url*.

    Parameters
    ----------
    url    : "memory://…" for the in-process stub, "redis://", "rediss://"
             or "unix://" for a real server
    kwargs : forwarded to the client constructor

    Raises
    ------
    ValueError — unsupported URL scheme
    """
    scheme = urlsplit(url).scheme
    client_cls = _CLIENT_MAP.get(scheme)
    if client_cls is None:
        raise ValueError(
            f"Unsupported store URL scheme: {scheme!r}. "
            f"Choose from: {list(_CLIENT_MAP)}"
        )
    if client_cls is MemoryStoreClient:
        return MemoryStoreClient(endpoint=url, **kwargs)
    return client_cls(url, **kwargs)
