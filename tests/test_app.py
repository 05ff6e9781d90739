"""Tests for the ``solcmd`` console script (cli/app.py).

Coverage:
* Routing: no args, ``--version``, ``options``, ``config``.
* Rich rendering and the plain-text fallback without Rich.
* ``cli()`` error boundary exit codes.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from solcmd.cli import exit_codes
from solcmd.cli.app import build_program, cli, main
from solcmd.cli.console import rich_available


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.table", "rich.logging", "rich.json", "rich.markup"):
        monkeypatch.setitem(sys.modules, name, None)


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

class TestRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert "solcmd" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_builtin_commands_registered(self) -> None:
        program = build_program()
        assert set(program.commands) == {"options", "config"}
        assert program.commands["config"].config_aware

    def test_rich_detection(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert rich_available()
        _hide_rich(monkeypatch)
        assert not rich_available()


# ---------------------------------------------------------------------------
# options
# ---------------------------------------------------------------------------

class TestOptionsCommand:
    def test_shows_cluster_rpc_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["options", "-e", "testnet"]) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "testnet" in err
        assert "api.testnet.solana.com" in err

    def test_explicit_rpc_url_wins(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["options", "-r", "http://127.0.0.1:8899", "-k", "id.json"])
        err = capsys.readouterr().err
        assert "http://127.0.0.1:8899" in err
        assert "id.json" in err

    def test_custom_env_marked(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["options", "-e", "localnet"])
        assert "custom" in capsys.readouterr().err

    def test_plain_output_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        assert main(["options"]) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "devnet" in err
        assert "api.devnet.solana.com" in err


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

class TestConfigCommand:
    def test_shows_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "ns.json"
        path.write_text('{"namespace": "gold"}', encoding="utf-8")

        assert main(["config", "-cp", str(path)]) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "namespace" in err
        assert "gold" in err

    def test_plain_output_without_rich(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        path = tmp_path / "ns.json"
        path.write_text('{"namespace": "gold"}', encoding="utf-8")

        assert main(["config", "-cp", str(path)]) == exit_codes.SUCCESS
        assert '"namespace": "gold"' in capsys.readouterr().err

    def test_requires_config_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["config"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestCli:
    def test_missing_config_exits_general_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", ["solcmd", "config", "-cp", "absent.json"])

        with pytest.raises(SystemExit) as exc_info:
            cli()

        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "absent.json" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["solcmd", "options"])
        with patch("solcmd.cli.app._show_options", side_effect=KeyboardInterrupt):
            # Handler is bound at build time, so patch before cli() builds.
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
