"""Data models for the cache module."""

from dataclasses import dataclass

__all__ = ["CacheKey", "ScriptHash"]

# Opaque token returned by the store for a registered script body.
ScriptHash = str


@dataclass(frozen=True)
class CacheKey:
    """
    Composite key of the hash cache.

    endpoint — identity of the store connection target, e.g. "redis://host:6379/0"
    script   — stable script identity, e.g. an absolute file path
    """
    endpoint: str
    script:   str

    def __str__(self) -> str:
        return f"{self.endpoint}#{self.script}"
