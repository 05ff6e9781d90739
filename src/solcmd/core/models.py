"""Domain models for solcmd.

All models are **frozen** dataclasses — immutable value objects that
describe what a command accepts.  They carry zero I/O and never touch
:mod:`argparse` directly; the CLI layer turns them into parser calls.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from solcmd.core.clusters import DEFAULT_ENV, resolve_rpc_url


# ---------------------------------------------------------------------------
# Positional argument declaration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Argument:
    """A positional argument appended to a command.

    Arguments are added to the command in the order they are supplied, and
    their parsed values reach the handler in that same order.
    """

    name: str
    """Name shown in usage text (e.g. ``mint``)."""

    description: str = ""
    """Help text for ``--help``."""

    default: Any = None
    """Value used when an optional argument is omitted."""

    required: bool = True
    """When ``False`` the argument may be omitted."""

    variadic: bool = False
    """Collect all remaining values into a list."""

    choices: Sequence[Any] | None = None
    """Restrict the accepted values."""

    parser: Callable[[str], Any] | None = None
    """Converter applied to the raw string (``argparse`` ``type=``)."""

    @property
    def dest(self) -> str:
        """Attribute name under which the parsed value is stored."""
        return self.name.replace("-", "_")

    @property
    def nargs(self) -> str | None:
        if self.variadic:
            return "+" if self.required else "*"
        return None if self.required else "?"

    def argparse_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for :meth:`argparse.ArgumentParser.add_argument`."""
        kwargs: dict[str, Any] = {"metavar": self.name, "help": self.description or None}
        if self.nargs is not None:
            kwargs["nargs"] = self.nargs
        if not self.required or self.default is not None:
            kwargs["default"] = self.default
        if self.choices is not None:
            kwargs["choices"] = list(self.choices)
        if self.parser is not None:
            kwargs["type"] = self.parser
        return kwargs


# ---------------------------------------------------------------------------
# Standard options view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StandardOptions:
    """Typed view of the options every command carries."""

    env: str = DEFAULT_ENV
    rpc_url: str | None = None
    log_level: int | str | None = None
    keypair: str | None = None
    config_path: str | None = None

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> StandardOptions:
        """Build from a parsed namespace, ignoring command-specific extras."""
        return cls(
            env=getattr(namespace, "env", DEFAULT_ENV),
            rpc_url=getattr(namespace, "rpc_url", None),
            log_level=getattr(namespace, "log_level", None),
            keypair=getattr(namespace, "keypair", None),
            config_path=getattr(namespace, "config_path", None),
        )

    @property
    def resolved_rpc_url(self) -> str | None:
        """``--rpc-url`` if given, else the public endpoint of ``--env``."""
        return resolve_rpc_url(self.env, self.rpc_url)
