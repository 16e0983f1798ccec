"""
Unit tests for scriptcache/cli/

Coverage plan
─────────────
arg parsing   → load / eval / flush-cache subcommands, defaults
commands      → cmd_load, cmd_eval (plain + as-dict + bad numkeys), cmd_flush
main()        → exit codes with the memory:// backend
"""

from pathlib import Path

import pytest

from scriptcache.cli.main import build_parser, cmd_eval, cmd_flush, cmd_load, main
from scriptcache.client import MemoryStoreClient
from scriptcache.invoker import ScriptInvoker
from scriptcache.registry import FileScriptRegistry


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    return build_parser().parse_args(args)


@pytest.fixture
def lua_file(tmp_path) -> Path:
    path = tmp_path / "user.lua"
    path.write_text("return redis.call('HGETALL', KEYS[1])", encoding="utf-8")
    return path


@pytest.fixture
def store() -> MemoryStoreClient:
    return MemoryStoreClient("memory://cli")


@pytest.fixture
def invoker(store) -> ScriptInvoker:
    return ScriptInvoker(store, FileScriptRegistry())


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_load_subcommand(self):
        ns = _parse(["load", "lua/save.lua"])
        assert ns.subcommand == "load"
        assert ns.script == "lua/save.lua"

    def test_eval_defaults(self):
        ns = _parse(["eval", "lua/save.lua"])
        assert ns.numkeys == 0
        assert ns.args == []
        assert ns.as_dict is False

    def test_eval_with_keys_and_args(self):
        ns = _parse(["eval", "--numkeys", "1", "--as-dict", "s.lua", "user:1", "ann"])
        assert ns.numkeys == 1
        assert ns.args == ["user:1", "ann"]
        assert ns.as_dict is True

    def test_global_url_flag(self):
        ns = _parse(["--url", "redis://cache:6379/2", "flush-cache"])
        assert ns.url == "redis://cache:6379/2"
        assert ns.subcommand == "flush-cache"

    def test_max_attempts_defaults_to_none(self):
        assert _parse(["load", "x.lua"]).max_attempts is None


# ─────────────────────────────────────────────────────────────────────────────
# 2. Commands
# ─────────────────────────────────────────────────────────────────────────────

class TestCommands:

    def test_cmd_load_prints_hash(self, invoker, lua_file, capsys):
        sha = cmd_load(invoker, str(lua_file))
        assert capsys.readouterr().out.strip() == sha
        assert sha == MemoryStoreClient.sha_of(lua_file.read_text(encoding="utf-8"))

    def test_cmd_eval_prints_list_items(self, invoker, lua_file, capsys):
        result = cmd_eval(invoker, str(lua_file), ["user:1"], numkeys=1)
        assert result == [1, "user:1"]
        assert capsys.readouterr().out.splitlines() == ["1", "user:1"]

    def test_cmd_eval_as_dict(self, store, invoker, lua_file, capsys):
        source = lua_file.read_text(encoding="utf-8")
        store.handlers[source] = lambda numkeys, key: ["name", "ann", "age", "41"]
        cmd_eval(invoker, str(lua_file), ["user:1"], numkeys=1, as_dict=True)
        assert capsys.readouterr().out.splitlines() == ["name: ann", "age: 41"]

    def test_cmd_eval_rejects_bad_numkeys(self, invoker, lua_file):
        with pytest.raises(ValueError):
            cmd_eval(invoker, str(lua_file), [], numkeys=2)

    def test_cmd_flush(self, store, invoker, lua_file, capsys):
        sha = invoker.load(str(lua_file))
        cmd_flush(store)
        assert not store.is_loaded(sha)
        assert "memory://cli" in capsys.readouterr().out


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_no_subcommand_prints_help(self, capsys):
        assert main(["--url", "memory://"]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_load_returns_zero(self, lua_file, capsys):
        assert main(["--url", "memory://main", "load", str(lua_file)]) == 0
        assert len(capsys.readouterr().out.strip()) == 40

    def test_missing_script_returns_one(self, tmp_path, capsys):
        code = main(["--url", "memory://main", "load", str(tmp_path / "nope.lua")])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_eval_with_keys_end_to_end(self, lua_file, capsys):
        code = main([
            "--url", "memory://main", "eval", "--numkeys", "1", str(lua_file), "user:1",
        ])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["1", "user:1"]

    def test_eval_numkeys_after_script_is_rejected(self, lua_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["--url", "memory://main", "eval", str(lua_file), "--numkeys", "1", "k"])
        assert exc_info.value.code == 2

    def test_bad_url_returns_two(self, capsys):
        assert main(["--url", "ftp://x", "flush-cache"]) == 2
        assert "Unsupported" in capsys.readouterr().err

    def test_bad_max_attempts_returns_two(self, lua_file):
        assert main(["--url", "memory://", "--max-attempts", "0", "load", str(lua_file)]) == 2
