"""
cli — command-line interface for scriptcache.

Entry points
────────────
  python -m scriptcache   (via scriptcache/__main__.py)
  scriptcache             (via pyproject.toml [project.scripts])

Subcommands: load | eval | flush-cache
"""

from scriptcache.cli.main import build_parser, cmd_eval, cmd_flush, cmd_load, main

__all__ = ["build_parser", "cmd_eval", "cmd_flush", "cmd_load", "main"]
