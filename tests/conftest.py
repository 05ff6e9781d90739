"""Shared pytest fixtures and configuration for the solcmd test suite.

Guidelines
----------
* No network access in any test.
* Root-logger state is restored after every test, since ``--log-level``
  changes it process-wide.
* Every test builds its own :class:`~solcmd.cli.program.Program`; the
  shared default program is only touched through ``monkeypatch``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from solcmd.cli.program import Program
from solcmd.infra.logging_setup import HANDLER_NAME


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)


@pytest.fixture()
def program() -> Program:
    return Program(prog="test-cli")


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    return path
