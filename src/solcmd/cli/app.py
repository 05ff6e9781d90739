"""The ``solcmd`` console script.

A small program built with the command builder itself, useful for
checking how the standard options and a config file resolve before
wiring them into a real tool:

* ``solcmd options [-e ENV] [-r URL] [-k PATH]`` — show resolved options
* ``solcmd config -cp FILE``                  — load and show a config
* ``solcmd --version``

Output goes to stderr through the Rich console, with a plain-text
fallback when Rich is not installed.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from solcmd.cli import exit_codes
from solcmd.cli.console import console, rich_available
from solcmd.cli.program import Program
from solcmd.core.clusters import is_known_cluster
from solcmd.core.models import StandardOptions
from solcmd.version import __version__


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _option_rows(options: StandardOptions) -> list[tuple[str, str]]:
    def show(value: object) -> str:
        return "-" if value is None else str(value)

    env = options.env
    if not is_known_cluster(env):
        env = f"{env} (custom)"

    return [
        ("env", env),
        ("rpc-url", show(options.resolved_rpc_url)),
        ("log-level", show(options.log_level)),
        ("keypair", show(options.keypair)),
    ]


def _show_options(options: argparse.Namespace) -> int:
    """Render the resolved standard options."""
    rows = _option_rows(StandardOptions.from_namespace(options))

    if not rich_available():
        for label, value in rows:
            print(f"{label:<12} {value}", file=sys.stderr)
        return exit_codes.SUCCESS

    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title="solcmd options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Option", style="bold", min_width=10)
    table.add_column("Value", min_width=20)
    for label, value in rows:
        table.add_row(label, escape(value))

    console.print(table)
    return exit_codes.SUCCESS


def _show_config(config: Any, options: argparse.Namespace) -> int:
    """Render the loaded config file as JSON."""
    text = json.dumps(config, indent=2, sort_keys=True)

    if not rich_available():
        print(f"# {options.config_path}", file=sys.stderr)
        print(text, file=sys.stderr)
        return exit_codes.SUCCESS

    from rich.json import JSON
    from rich.markup import escape

    console.print(f"[bold]Config[/bold]  {escape(options.config_path)}")
    console.print(JSON(text))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

def build_program() -> Program:
    """Construct the ``solcmd`` program with its built-in commands."""
    program = Program(
        prog="solcmd",
        description="Inspect how solcmd resolves standard options and config files.",
        version=__version__,
    )
    program.command_with_action(
        "options",
        [],
        _show_options,
        require_keypair=False,
        help="Show the resolved standard options.",
    )
    program.command_with_config(
        "config",
        _show_config,
        require_keypair=False,
        help="Load a JSON config file and show its contents.",
    )
    return program


def main(argv: list[str] | None = None) -> int:
    """Run the solcmd CLI and return its exit code.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    """
    return build_program().parse(argv)


def cli() -> None:
    """Console-script entry point with the error boundary applied."""
    build_program().run()
