"""Standard option groups shared by every command.

Each group is a help-less :class:`argparse.ArgumentParser` meant to be
passed as ``parents=`` when a command's sub-parser is created, so all
commands spell the flags, defaults, and help text identically.
"""

from __future__ import annotations

import argparse

from solcmd.core.clusters import CLUSTER_URLS, DEFAULT_ENV
from solcmd.infra.logging_setup import parse_log_level

STANDARD_DESTS: frozenset[str] = frozenset(
    {"env", "rpc_url", "log_level", "keypair", "config_path", "help"},
)
"""Attribute names reserved by the standard options."""


def _network_options(require_keypair: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "-e",
        "--env",
        default=DEFAULT_ENV,
        metavar="<string>",
        help=f"Solana cluster env name ({', '.join(CLUSTER_URLS)}; default: %(default)s).",
    )
    parser.add_argument(
        "-r",
        "--rpc-url",
        default=None,
        metavar="<string>",
        help="Solana cluster RPC URL.",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        type=parse_log_level,
        metavar="<string>",
        help="Log level (debug, info, warning, error, critical, off).",
    )
    parser.add_argument(
        "-k",
        "--keypair",
        required=require_keypair,
        default=None,
        metavar="<path>",
        help="Solana wallet key-pair location.",
    )
    return parser


#: Standard options with a mandatory ``--keypair``.
keypair_required_options = _network_options(require_keypair=True)

#: Standard options where ``--keypair`` may be omitted.
keypair_optional_options = _network_options(require_keypair=False)

#: Extra option carried by config-aware commands.
config_options = argparse.ArgumentParser(add_help=False)
config_options.add_argument(
    "-cp",
    "--config-path",
    required=True,
    metavar="<string>",
    help="JSON file with command settings.",
)


def standard_options(require_keypair: bool = True) -> argparse.ArgumentParser:
    """Return the parent parser matching *require_keypair*."""
    return keypair_required_options if require_keypair else keypair_optional_options
