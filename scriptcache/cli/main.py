"""
CLI entry point for scriptcache.

Usage
─────
  # Register a script and print its hash
  python -m scriptcache --url redis://localhost:6379/0 load lua/save.lua

  # Run a script by hash (loading it first if needed)
  python -m scriptcache eval --numkeys 1 --as-dict lua/get_user.lua user:42

  # Make the server forget every script (exercises the reload path)
  python -m scriptcache flush-cache

Subcommands are implemented as standalone functions (cmd_load, cmd_eval,
cmd_flush) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import os
import sys
from typing import Any, Optional

from scriptcache.client import StoreClient, connect
from scriptcache.exceptions import ScriptCacheError
from scriptcache.invoker import InvokerConfig, ScriptInvoker
from scriptcache.registry import FileScriptRegistry
from scriptcache.util import pairs_to_dict

__all__ = ["build_parser", "cmd_load", "cmd_eval", "cmd_flush", "main"]

logger = logging.getLogger(__name__)

DEFAULT_URL = "redis://localhost:6379/0"


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: load | eval | flush-cache
    """
    parser = argparse.ArgumentParser(
        prog="scriptcache",
        description="Run store-side Lua scripts by hash with automatic reload",
    )
    parser.add_argument(
        "--url",
        default=os.environ.get("SCRIPTCACHE_URL", DEFAULT_URL),
        metavar="URL",
        help=f"Store URL (default: $SCRIPTCACHE_URL or {DEFAULT_URL})",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        dest="max_attempts",
        metavar="N",
        help="Evaluations per call before giving up on NOSCRIPT "
             "(default: $SCRIPTCACHE_MAX_ATTEMPTS or 3)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── load ──────────────────────────────────────────────────────────────
    load = sub.add_parser("load", help="Register a script and print its hash")
    load.add_argument("script", metavar="SCRIPT", help="Path to the Lua script")

    # ── eval ──────────────────────────────────────────────────────────────
    # Options must precede SCRIPT; positionals after a trailing option are rejected.
    ev = sub.add_parser("eval", help="Run a script by hash")
    ev.add_argument(
        "--numkeys",
        type=int,
        default=0,
        metavar="N",
        help="How many of ARG are keys (default: 0)",
    )
    ev.add_argument(
        "--as-dict",
        action="store_true",
        default=False,
        dest="as_dict",
        help="Print a flat [k, v, …] reply as key: value lines",
    )
    ev.add_argument("script", metavar="SCRIPT", help="Path to the Lua script")
    ev.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Keys followed by arguments",
    )

    # ── flush-cache ───────────────────────────────────────────────────────
    sub.add_parser("flush-cache", help="Drop every script registered on the store")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _make_client(url: str) -> StoreClient:
    if url.startswith("memory://"):
        return connect(url)
    return connect(url, decode_responses=True)


def _print_result(result: Any, as_dict: bool) -> None:
    if as_dict:
        for key, value in pairs_to_dict(result or []).items():
            print(f"{key}: {value}")
    elif isinstance(result, list):
        for item in result:
            print(item)
    elif result is not None:
        print(result)


# ── Command implementations ───────────────────────────────────────────────────


def cmd_load(invoker: ScriptInvoker, script: str) -> str:
    """Register *script* (unless already cached) and print its hash."""
    sha = invoker.load(script)
    print(sha)
    return sha


def cmd_eval(
    invoker: ScriptInvoker,
    script: str,
    args: list[str],
    numkeys: int = 0,
    as_dict: bool = False,
) -> Any:
    """
    Run *script* with `numkeys` followed by *args*, print and return the result.

    Raises:
        ValueError: numkeys is negative or larger than the number of args.
    """
    if numkeys < 0 or numkeys > len(args):
        raise ValueError(f"--numkeys {numkeys} does not fit {len(args)} argument(s)")
    result = invoker.invoke(script, numkeys, *args)
    _print_result(result, as_dict)
    return result


def cmd_flush(client: StoreClient) -> None:
    """Drop every registered script on the store."""
    client.script_flush()
    logger.info("Flushed scripts on %s", client.endpoint)
    print(f"Flushed scripts on {client.endpoint}")


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        config = InvokerConfig.from_env()
        if ns.max_attempts is not None:
            config = InvokerConfig(
                max_attempts=ns.max_attempts,
                invalidate_scope=config.invalidate_scope,
            )
        client = _make_client(ns.url)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    invoker = ScriptInvoker(client, FileScriptRegistry(), config=config)

    try:
        if ns.subcommand == "load":
            cmd_load(invoker, ns.script)
        elif ns.subcommand == "eval":
            cmd_eval(invoker, ns.script, ns.args, ns.numkeys, ns.as_dict)
        elif ns.subcommand == "flush-cache":
            cmd_flush(client)
    except (ScriptCacheError, ValueError) as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
