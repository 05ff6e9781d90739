"""CLI console helpers with optional Rich support.

Used by the ``Program.run`` error boundary to report errors and hints,
and by the built-in ``solcmd options`` / ``solcmd config`` commands to
render their tables and JSON.  Everything goes to stderr.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working even when it is not installed; :func:`rich_available`
lets callers pick a plain-text rendering instead.
"""

from __future__ import annotations

import sys
from typing import Any

from solcmd.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def rich_available() -> bool:
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
