"""Command builder — standard subcommands on top of :mod:`argparse`.

A :class:`Program` owns the root parser.  Every command it creates
inherits the standard options from :mod:`solcmd.cli.options`, optionally
declares positional :class:`~solcmd.core.models.Argument` entries, and
is bound to a handler.

Invocation contract
-------------------
* argparse rejects missing required options (``SystemExit(2)``) before
  any handler runs.
* The log level is applied via
  :func:`~solcmd.infra.logging_setup.configure_logging` after parsing and
  before the handler runs.
* The handler receives the positional values in declaration order,
  followed by an :class:`argparse.Namespace` holding only the options.
  Config-aware commands prepend the loaded config.
* Awaitable results are awaited; the final result becomes the exit code.

The module-level functions mirror the :class:`Program` methods and act
on the shared default :data:`program`.
"""

from __future__ import annotations

import argparse
import asyncio
import inspect
import logging
import sys
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, NoReturn

from pydantic import BaseModel

from solcmd.cli import exit_codes
from solcmd.cli.console import console
from solcmd.cli.options import STANDARD_DESTS, config_options, standard_options
from solcmd.core.models import Argument
from solcmd.exceptions import (
    CommandDefinitionError,
    DuplicateCommandError,
    MissingConfigPathError,
    SolcmdError,
)
from solcmd.infra.config_loader import load_config
from solcmd.infra.logging_setup import configure_logging

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]

COMMAND_DEST: str = "command"
"""Root-namespace attribute holding the selected command name."""

_COMMAND_KEY: str = "_solcmd_command"


def exit_code_for(result: Any) -> int:
    """Translate a handler's return value into a process exit code.

    ``None`` and ``True`` mean success, ``False`` means failure, and an
    ``int`` in ``0..255`` is used verbatim.  Integers outside that range
    would be wrapped by the OS (256 becomes 0), so they map to
    ``GENERAL_ERROR``.  Any other value is treated as success.
    """
    if result is None:
        return exit_codes.SUCCESS
    if isinstance(result, bool):
        return exit_codes.SUCCESS if result else exit_codes.GENERAL_ERROR
    if isinstance(result, int):
        if not exit_codes.SUCCESS <= result <= exit_codes.MAX_EXIT_CODE:
            logger.warning("Exit code %d out of range; using %d", result, exit_codes.GENERAL_ERROR)
            return exit_codes.GENERAL_ERROR
        return result
    return exit_codes.SUCCESS


def _option_dest(flags: Sequence[str]) -> str:
    """Destination ``argparse`` derives for an option declared with *flags*."""
    if not flags:
        return ""
    if not flags[0].startswith("-"):
        return flags[0]
    long_flags = [flag for flag in flags if len(flag) > 1 and flag[1] == "-"]
    source = long_flags[0] if long_flags else flags[0]
    return source.lstrip("-").replace("-", "_")


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class Command:
    """A named subcommand: its sub-parser, arguments, and bound handler.

    Instances are created by :class:`Program`; the chainable
    :meth:`argument`, :meth:`option`, and :meth:`action` helpers refine
    them afterwards.
    """

    def __init__(
        self,
        name: str,
        parser: argparse.ArgumentParser,
        *,
        config_aware: bool = False,
        model: type[BaseModel] | None = None,
    ) -> None:
        self.name: str = name
        self.parser: argparse.ArgumentParser = parser
        self.config_aware: bool = config_aware
        self.model: type[BaseModel] | None = model
        self.arguments: list[Argument] = []
        self.handler: Handler | None = None
        self._dests: set[str] = {*STANDARD_DESTS, COMMAND_DEST, _COMMAND_KEY}

        parser.set_defaults(**{_COMMAND_KEY: self})

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, arguments={[a.name for a in self.arguments]!r})"

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def argument(self, argument: Argument) -> Command:
        """Append a positional *argument* after those already declared."""
        if argument.dest in self._dests:
            raise CommandDefinitionError(
                f"Argument '{argument.name}' of command '{self.name}' clashes "
                f"with an existing option or argument.",
            )
        self.parser.add_argument(argument.dest, **argument.argparse_kwargs())
        self.arguments.append(argument)
        self._dests.add(argument.dest)
        return self

    def option(self, *flags: str, **kwargs: Any) -> Command:
        """Add a command-specific option; arguments go to ``add_argument``.

        Raises
        ------
        CommandDefinitionError
            When the option's destination or flags clash with an existing
            option or argument.
        """
        dest = kwargs.get("dest") or _option_dest(flags)
        if dest in self._dests:
            raise CommandDefinitionError(
                f"Option {'/'.join(flags) or dest!r} of command '{self.name}' clashes "
                f"with an existing option or argument.",
            )
        try:
            action = self.parser.add_argument(*flags, **kwargs)
        except argparse.ArgumentError as exc:
            raise CommandDefinitionError(
                f"Option {'/'.join(flags)!r} of command '{self.name}' is invalid: {exc}",
            ) from exc
        self._dests.add(action.dest)
        return self

    def action(self, handler: Handler) -> Command:
        """Bind (or rebind) the handler run when this command is invoked."""
        self.handler = handler
        return self

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def split_namespace(self, namespace: argparse.Namespace) -> tuple[list[Any], argparse.Namespace]:
        """Separate positional values (in order) from option values."""
        positional_dests = {argument.dest for argument in self.arguments}
        positionals = [getattr(namespace, argument.dest) for argument in self.arguments]
        options = argparse.Namespace(
            **{
                key: value
                for key, value in vars(namespace).items()
                if key not in positional_dests and key not in (_COMMAND_KEY, COMMAND_DEST)
            },
        )
        return positionals, options

    def load_config(self, options: argparse.Namespace) -> Any:
        """Load this command's config from ``options.config_path``."""
        config_path = getattr(options, "config_path", None)
        if config_path is None:
            raise MissingConfigPathError(
                "The config path is undefined",
                hint="Pass -cp/--config-path <file>.",
            )
        return load_config(config_path, self.model)

    def build_call_args(self, namespace: argparse.Namespace) -> tuple[Any, ...]:
        """Return the positional arguments the handler will be called with."""
        positionals, options = self.split_namespace(namespace)
        if self.config_aware:
            return (self.load_config(options), *positionals, options)
        return (*positionals, options)

    def invoke(self, namespace: argparse.Namespace) -> Any:
        """Run the handler for a parsed *namespace* and return its result.

        The result may be an awaitable; awaiting it is left to the caller.
        """
        call_args = self.build_call_args(namespace)
        if self.handler is None:
            logger.debug("Command '%s' has no action bound", self.name)
            return None

        logger.debug("Invoking command '%s'", self.name)
        return self.handler(*call_args)


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

class Program:
    """Root parser plus the subcommands registered on it.

    Parameters
    ----------
    prog:
        Program name shown in usage text.  Defaults to ``sys.argv[0]``.
    description:
        Text shown at the top of ``--help``.
    version:
        When given, adds ``-V/--version``.
    """

    def __init__(
        self,
        prog: str | None = None,
        description: str | None = None,
        version: str | None = None,
    ) -> None:
        self.parser = argparse.ArgumentParser(prog=prog, description=description)
        if version is not None:
            self.parser.add_argument(
                "-V",
                "--version",
                action="version",
                version=f"%(prog)s {version}",
            )
        self._subparsers = self.parser.add_subparsers(dest=COMMAND_DEST, metavar="<command>")
        self.commands: dict[str, Command] = {}

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def _new_command(
        self,
        name: str,
        require_keypair: bool,
        *,
        config_aware: bool = False,
        model: type[BaseModel] | None = None,
        help: str | None = None,
    ) -> Command:
        if name in self.commands:
            raise DuplicateCommandError(f"Command '{name}' is already defined.")

        parents = [standard_options(require_keypair)]
        if config_aware:
            parents.append(config_options)

        parser = self._subparsers.add_parser(name, parents=parents, help=help, description=help)
        command = Command(name, parser, config_aware=config_aware, model=model)
        self.commands[name] = command
        return command

    def command(self, name: str, require_keypair: bool = True, *, help: str | None = None) -> Command:
        """Create *name* with the standard options and nothing else."""
        return self._new_command(name, require_keypair, help=help)

    def command_with_args(
        self,
        name: str,
        arguments: Sequence[Argument],
        require_keypair: bool = True,
        *,
        help: str | None = None,
    ) -> Command:
        """Create *name* with the standard options plus *arguments* in order."""
        command = self.command(name, require_keypair, help=help)
        for argument in arguments:
            command.argument(argument)
        return command

    def command_with_action(
        self,
        name: str,
        arguments: Sequence[Argument],
        handler: Handler,
        require_keypair: bool = True,
        *,
        help: str | None = None,
    ) -> Command:
        """Create *name* with *arguments* and bind *handler*."""
        return self.command_with_args(name, arguments, require_keypair, help=help).action(handler)

    def command_with_config(
        self,
        name: str,
        handler: Handler,
        require_keypair: bool = True,
        *,
        model: type[BaseModel] | None = None,
        help: str | None = None,
    ) -> Command:
        """Create a config-aware *name* with no positional arguments."""
        return self.command_with_args_and_config(
            name, [], handler, require_keypair, model=model, help=help,
        )

    def command_with_args_and_config(
        self,
        name: str,
        arguments: Sequence[Argument],
        handler: Handler,
        require_keypair: bool = True,
        *,
        model: type[BaseModel] | None = None,
        help: str | None = None,
    ) -> Command:
        """Create a config-aware *name*; the handler gets the config first.

        ``--config-path`` is required.  With *model* the decoded JSON is
        validated into that pydantic model before the handler runs.
        """
        command = self._new_command(
            name, require_keypair, config_aware=True, model=model, help=help,
        )
        for argument in arguments:
            command.argument(argument)
        return command.action(handler)

    # ------------------------------------------------------------------
    # Parsing and dispatch
    # ------------------------------------------------------------------

    def _prepare(self, argv: Sequence[str] | None) -> tuple[Command | None, argparse.Namespace]:
        namespace = self.parser.parse_args(argv)
        configure_logging(getattr(namespace, "log_level", None))
        return getattr(namespace, _COMMAND_KEY, None), namespace

    def parse(self, argv: Sequence[str] | None = None) -> int:
        """Parse *argv*, run the selected command, and return an exit code.

        Awaitable handler results are run to completion with
        :func:`asyncio.run`; use :meth:`parse_async` from inside an event
        loop.  Without a command, help is printed and ``SUCCESS`` returned.
        """
        command, namespace = self._prepare(argv)
        if command is None:
            self.parser.print_help()
            return exit_codes.SUCCESS

        result = command.invoke(namespace)
        if inspect.isawaitable(result):
            result = asyncio.run(_await(result))
        return exit_code_for(result)

    async def parse_async(self, argv: Sequence[str] | None = None) -> int:
        """Like :meth:`parse`, but awaits the handler on the running loop."""
        command, namespace = self._prepare(argv)
        if command is None:
            self.parser.print_help()
            return exit_codes.SUCCESS

        result = command.invoke(namespace)
        if inspect.isawaitable(result):
            result = await result
        return exit_code_for(result)

    # ------------------------------------------------------------------
    # Script-level error boundary
    # ------------------------------------------------------------------

    def run(self, argv: Sequence[str] | None = None) -> NoReturn:
        """Process entry point: :meth:`parse` wrapped in an error boundary.

        Guarantees the process never exits with a raw stack trace for a
        known :class:`~solcmd.exceptions.SolcmdError`.
        """
        try:
            code = self.parse(argv)
            sys.exit(code)
        except SolcmdError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            if exc.hint:
                console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
            sys.exit(exit_codes.GENERAL_ERROR)
        except KeyboardInterrupt:
            console.print("\n[yellow]Aborted by user.[/yellow]")
            sys.exit(exit_codes.KEYBOARD_INTERRUPT)
        except Exception as exc:  # noqa: BLE001
            console.print(
                "[bold red]Unexpected error.[/bold red] "
                "Please report this issue.\n"
                f"  {type(exc).__name__}: {exc}"
            )
            sys.exit(exit_codes.UNEXPECTED_ERROR)


# ---------------------------------------------------------------------------
# Default program
# ---------------------------------------------------------------------------

program = Program()
"""Process-wide default program used by the module-level builders."""


def command(name: str, require_keypair: bool = True, *, help: str | None = None) -> Command:
    return program.command(name, require_keypair, help=help)


def command_with_args(
    name: str,
    arguments: Sequence[Argument],
    require_keypair: bool = True,
    *,
    help: str | None = None,
) -> Command:
    return program.command_with_args(name, arguments, require_keypair, help=help)


def command_with_action(
    name: str,
    arguments: Sequence[Argument],
    handler: Handler,
    require_keypair: bool = True,
    *,
    help: str | None = None,
) -> Command:
    return program.command_with_action(name, arguments, handler, require_keypair, help=help)


def command_with_config(
    name: str,
    handler: Handler,
    require_keypair: bool = True,
    *,
    model: type[BaseModel] | None = None,
    help: str | None = None,
) -> Command:
    return program.command_with_config(name, handler, require_keypair, model=model, help=help)


def command_with_args_and_config(
    name: str,
    arguments: Sequence[Argument],
    handler: Handler,
    require_keypair: bool = True,
    *,
    model: type[BaseModel] | None = None,
    help: str | None = None,
) -> Command:
    return program.command_with_args_and_config(
        name, arguments, handler, require_keypair, model=model, help=help,
    )


def parse(argv: Sequence[str] | None = None) -> int:
    return program.parse(argv)


async def parse_async(argv: Sequence[str] | None = None) -> int:
    return await program.parse_async(argv)
