"""Abstract base class for all script registries."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["ScriptRegistry"]


class ScriptRegistry(ABC):
    """
    Source of script bodies, addressed by a stable script identity.

    The registry does not cache anything; the loader only asks for source on
    a hash-cache miss.
    """

    def identity(self, name: str) -> str:
        """
        Normalise a caller-supplied *name* to the identity used as cache key.
        The default is the name unchanged.
        """
        return name

    @abstractmethod
    def read_source(self, script: str) -> str:
        """
        Return the full source text of *script*.

        Raises ScriptNotFoundError if the registry has no such script.
        """
