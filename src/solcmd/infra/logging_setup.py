"""Infrastructure: process-wide logging configuration.

The ``--log-level`` option only *normalises* its value at parse time;
the level is applied afterwards by :func:`configure_logging`, which the
program calls explicitly before any command handler runs.  Validation
is left to :mod:`logging` itself — an unknown name is whatever
``Logger.setLevel`` rejects.

Console output goes through :class:`rich.logging.RichHandler` on stderr,
or a plain :class:`logging.StreamHandler` when Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys

from solcmd.exceptions import InvalidLogLevelError

logger = logging.getLogger(__name__)

HANDLER_NAME: str = "solcmd"
"""Name given to the installed handler so it is only added once."""

OFF: int = logging.CRITICAL + 10
"""Level above CRITICAL — silences every record."""

LEVEL_ALIASES: dict[str, int] = {
    "OFF": OFF,
    "SILENT": OFF,
}

_INTEGER = re.compile(r"-?[0-9]+")

VALID_LEVEL_NAMES: tuple[str, ...] = ("debug", "info", "warning", "error", "critical", "off")


def parse_log_level(value: str) -> int | str | None:
    """``argparse`` converter for ``--log-level``.

    Numeric strings become ``int``; names are upper-cased so ``debug``
    matches :data:`logging.DEBUG`.  Unknown names pass through untouched.
    """
    stripped = value.strip()
    if not stripped:
        return None
    if _INTEGER.fullmatch(stripped):
        return int(stripped)

    upper = stripped.upper()
    return LEVEL_ALIASES.get(upper, upper)


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    handler.set_name(HANDLER_NAME)
    return handler


def install_handler(target: logging.Logger | None = None) -> logging.Handler:
    """Attach the solcmd console handler to *target* (root by default) once."""
    target = target if target is not None else logging.getLogger()
    for existing in target.handlers:
        if existing.get_name() == HANDLER_NAME:
            return existing

    handler = _build_handler()
    target.addHandler(handler)
    return handler


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Apply *level* to the root logger and return it.

    Nothing is touched when *level* is ``None`` or empty.  Otherwise the
    verbosity is set, and the console handler is installed only if the
    root logger has no handlers yet, so a host application's own
    ``logging`` setup is left alone.

    Raises
    ------
    InvalidLogLevelError
        When :mod:`logging` does not recognise *level*.
    """
    root = logging.getLogger()
    if level is None or level == "":
        return root

    try:
        root.setLevel(level)
    except (TypeError, ValueError) as exc:
        raise InvalidLogLevelError(
            f"Unknown log level: {level!r}",
            hint=f"Use one of: {', '.join(VALID_LEVEL_NAMES)} or a number.",
        ) from exc

    if not root.handlers:
        install_handler(root)

    logger.info("Log level set to %s", logging.getLevelName(root.level))
    return root
