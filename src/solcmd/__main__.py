"""Allow ``python -m solcmd`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m solcmd`` behaves identically to the ``solcmd`` console script.
"""

from __future__ import annotations

from solcmd.cli.app import cli

if __name__ == "__main__":
    cli()
