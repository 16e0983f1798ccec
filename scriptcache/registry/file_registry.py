"""Registries backed by files on disk or by an in-memory dict."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from scriptcache.exceptions import ScriptNotFoundError

from .base import ScriptRegistry

__all__ = ["FileScriptRegistry", "InMemoryScriptRegistry"]

logger = logging.getLogger(__name__)


class FileScriptRegistry(ScriptRegistry):
    """
    Reads Lua scripts from the filesystem.

    The identity of a script is its absolute, user-expanded path, so
    "lua/save.lua" and "./lua/save.lua" share one cache entry. Relative names
    resolve against *base_dir* (default: current working directory).
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        self._base_dir = Path(base_dir).expanduser() if base_dir else None

    def identity(self, name: str) -> str:
        path = Path(name).expanduser()
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path
        return str(path.resolve())

    def read_source(self, script: str) -> str:
        path = Path(self.identity(script))
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ScriptNotFoundError(f"Script file not found: {path}") from exc
        except OSError as exc:
            raise ScriptNotFoundError(f"Cannot read script {path}: {exc}") from exc
        logger.debug("Read %d bytes of source from %s", len(source), path)
        return source


class InMemoryScriptRegistry(ScriptRegistry):
    """Registry over a plain {identity: source} dict."""

    def __init__(self, scripts: Optional[dict[str, str]] = None) -> None:
        self._scripts: dict[str, str] = dict(scripts or {})

    def add(self, script: str, source: str) -> None:
        self._scripts[script] = source

    def read_source(self, script: str) -> str:
        try:
            return self._scripts[script]
        except KeyError:
            raise ScriptNotFoundError(f"Unknown script: {script!r}") from None
