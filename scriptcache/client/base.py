"""Abstract base class for store clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["StoreClient"]


class StoreClient(ABC):
    """
    The two scripting operations the cache needs from a key-value store.

    Implementations must translate transport failures into
    StoreUnavailableError and error replies into StoreReplyError carrying the
    reply text verbatim; the invoker pattern-matches on that text.
    """

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Identity of the connection target; scopes hash-cache entries."""

    @abstractmethod
    def script_load(self, source: str) -> str:
        """Register *source* with the store and return its content hash."""

    @abstractmethod
    def evalsha(self, sha: str, *args: Any) -> Any:
        """
        Run the script registered under *sha*.

        *args* are sent verbatim after the hash (for Redis: numkeys, keys…, argv…).
        """

    @abstractmethod
    def script_flush(self) -> None:
        """Drop every script the store has registered."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.endpoint!r})"
