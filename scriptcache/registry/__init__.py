"""
registry — where script source comes from.

Each registry maps a stable script identity to its source text. The hash
cache is keyed by that identity, never by content.
"""

from .base import ScriptRegistry
from .file_registry import FileScriptRegistry, InMemoryScriptRegistry

__all__ = ["ScriptRegistry", "FileScriptRegistry", "InMemoryScriptRegistry"]
