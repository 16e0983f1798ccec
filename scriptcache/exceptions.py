"""
Project-wide custom exception hierarchy.
All modules raise subclasses of ScriptCacheError — never bare Exception.
"""

__all__ = [
    "ScriptCacheError",
    "StoreError",
    "StoreUnavailableError",
    "StoreReplyError",
    "ScriptNotFoundError",
    "ScriptNotLoadedError",
    "UniqueIndexViolation",
]


class ScriptCacheError(Exception):
    """Root exception for all scriptcache errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(ScriptCacheError):
    """Base class for failures reported by, or while talking to, the store."""


class StoreUnavailableError(StoreError):
    """Raised when the store cannot be reached or rejects script registration."""


class StoreReplyError(StoreError):
    """
    Raised when the store answers a command with an error reply.

    `message` holds the reply text exactly as the server sent it; the
    ErrorTranslator classifies on it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ── Registry ──────────────────────────────────────────────────────────────────

class ScriptNotFoundError(ScriptCacheError):
    """Raised when the script registry has no source for a script identity."""


# ── Invocation ────────────────────────────────────────────────────────────────

class ScriptNotLoadedError(ScriptCacheError):
    """Raised when the store keeps rejecting a script hash after all reloads."""

    def __init__(self, script: str, endpoint: str, attempts: int) -> None:
        super().__init__(
            f"Script {script!r} still unknown to {endpoint} "
            f"after {attempts} attempt(s)"
        )
        self.script = script
        self.endpoint = endpoint
        self.attempts = attempts


class UniqueIndexViolation(ScriptCacheError):
    """
    Raised when a script reports that a `unique` index value already exists.

    Rescue it around saves to handle conflicts, but also validate before
    attempting to save.
    """

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field
