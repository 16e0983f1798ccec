"""
RedisStoreClient — StoreClient over redis-py.

redis-py turns error replies into exception classes and strips some
prefixes on the way (a `NOSCRIPT No matching script…` reply becomes
NoScriptError("No matching script…")). The adapter puts the prefix back so
StoreReplyError.message reads as the server sent it.
"""

from __future__ import annotations

import logging
from typing import Any

import redis

from scriptcache.exceptions import StoreReplyError, StoreUnavailableError

from .base import StoreClient

__all__ = ["RedisStoreClient"]

logger = logging.getLogger(__name__)


class RedisStoreClient(StoreClient):
    """
    Parameters
    ----------
    url          : redis URL, e.g. "redis://localhost:6379/0"; also the endpoint id
    redis_kwargs : forwarded to redis.Redis.from_url (socket_timeout, decode_responses, …)
    """

    def __init__(self, url: str, **redis_kwargs: Any) -> None:
        self._url = url
        self._redis = redis.Redis.from_url(url, **redis_kwargs)

    @property
    def endpoint(self) -> str:
        return self._url

    def _reply_text(self, exc: Exception) -> str:
        text = str(exc)
        if isinstance(exc, redis.exceptions.NoScriptError) and not text.startswith("NOSCRIPT"):
            text = f"NOSCRIPT {text}"
        return text

    def _call(self, what: str, fn, *args: Any) -> Any:
        try:
            return fn(*args)
        except redis.exceptions.ResponseError as exc:
            raise StoreReplyError(self._reply_text(exc)) from exc
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as exc:
            logger.debug("%s on %s failed", what, self._url, exc_info=True)
            raise StoreUnavailableError(f"{what} on {self._url} failed: {exc}") from exc
        except redis.exceptions.RedisError as exc:
            raise StoreUnavailableError(f"{what} on {self._url} failed: {exc}") from exc

    def script_load(self, source: str) -> str:
        sha = self._call("SCRIPT LOAD", self._redis.script_load, source)
        return sha.decode() if isinstance(sha, bytes) else sha

    def evalsha(self, sha: str, *args: Any) -> Any:
        if not args:
            args = (0,)  # numkeys is mandatory on the wire
        return self._call("EVALSHA", self._redis.evalsha, sha, *args)

    def script_flush(self) -> None:
        self._call("SCRIPT FLUSH", self._redis.script_flush)
