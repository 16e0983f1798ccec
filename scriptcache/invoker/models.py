"""Data models and configuration for the invoker module."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

__all__ = [
    "ErrorKind",
    "DomainError",
    "InvocationRequest",
    "InvokerConfig",
    "INVALIDATE_SCOPES",
]


class ErrorKind(str, Enum):
    SCRIPT_NOT_LOADED = "script_not_loaded"
    UNIQUE_CONSTRAINT = "unique_constraint"
    UNKNOWN           = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DomainError:
    """
    Caller-facing classification of a store failure.

    kind    — which rule matched
    message — the raw failure text, untouched
    field   — index/field name for UNIQUE_CONSTRAINT, else None
    """
    kind:    ErrorKind
    message: str
    field:   Optional[str] = None

    @property
    def is_recoverable(self) -> bool:
        """True only for a stale hash, which a reload can fix."""
        return self.kind is ErrorKind.SCRIPT_NOT_LOADED


@dataclass(frozen=True)
class InvocationRequest:
    """
    One scripted call.

    script — script identity as understood by the registry
    args   — sent verbatim after the hash (Redis: numkeys, keys…, argv…)
    """
    script: str
    args:   tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"InvocationRequest({self.script!r}, nargs={len(self.args)})"


INVALIDATE_SCOPES = ("script", "endpoint")


@dataclass
class InvokerConfig:
    """
    Runtime configuration for ScriptInvoker.

    max_attempts     — evaluations per invocation, reloads included (≥ 1)
    invalidate_scope — on NOSCRIPT drop only the failing "script" entry, or
                       every entry of the "endpoint"
    """
    max_attempts:     int = 3
    invalidate_scope: str = "script"

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.invalidate_scope not in INVALIDATE_SCOPES:
            raise ValueError(
                f"Unknown invalidate_scope: {self.invalidate_scope!r}. "
                f"Choose from: {list(INVALIDATE_SCOPES)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "InvokerConfig":
        """
        Build a config from SCRIPTCACHE_MAX_ATTEMPTS and
        SCRIPTCACHE_INVALIDATE_SCOPE, falling back to the defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        raw_attempts = env.get("SCRIPTCACHE_MAX_ATTEMPTS")
        if raw_attempts:
            try:
                kwargs["max_attempts"] = int(raw_attempts)
            except ValueError:
                raise ValueError(
                    f"SCRIPTCACHE_MAX_ATTEMPTS must be an integer, got {raw_attempts!r}"
                ) from None
        scope = env.get("SCRIPTCACHE_INVALIDATE_SCOPE")
        if scope:
            kwargs["invalidate_scope"] = scope.strip().lower()
        return cls(**kwargs)
