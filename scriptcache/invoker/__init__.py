"""
invoker — load / cache / evaluate / retry / translate for scripted calls.

Public API
──────────
ScriptInvoker     — run a script by hash, reloading it if the store lost it
ScriptLoader      — return a script's hash, registering it on a cache miss
ErrorTranslator   — classify store failure text into a DomainError
script            — one-call helper using the process-wide cache
"""

from .invoker import ScriptInvoker, script
from .loader import ScriptLoader
from .models import (
    DomainError,
    ErrorKind,
    InvocationRequest,
    InvokerConfig,
)
from .translator import DUPLICATE_PATTERN, NOSCRIPT_PATTERN, ErrorTranslator

__all__ = [
    "ScriptInvoker",
    "script",
    "ScriptLoader",
    "DomainError",
    "ErrorKind",
    "InvocationRequest",
    "InvokerConfig",
    "ErrorTranslator",
    "NOSCRIPT_PATTERN",
    "DUPLICATE_PATTERN",
]
