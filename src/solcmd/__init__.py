"""solcmd — standard subcommand builder for Solana wallet CLIs.

Wraps :mod:`argparse` so every command shares the same cluster, RPC,
log-level, key-pair and (optionally) JSON config options.
"""

from solcmd.cli.program import (
    Command,
    Program,
    command,
    command_with_action,
    command_with_args,
    command_with_args_and_config,
    command_with_config,
    program,
)
from solcmd.core.models import Argument, StandardOptions
from solcmd.infra.config_loader import load_config
from solcmd.version import __version__

__all__: list[str] = [
    "Argument",
    "Command",
    "Program",
    "StandardOptions",
    "__version__",
    "command",
    "command_with_action",
    "command_with_args",
    "command_with_args_and_config",
    "command_with_config",
    "load_config",
    "program",
]
