"""Infrastructure layer — filesystem and process-wide state.

This layer reads config files and configures :mod:`logging`.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~solcmd.exceptions.SolcmdError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering outside the
  log handler).
"""

from solcmd.infra.config_loader import load_config
from solcmd.infra.logging_setup import configure_logging, install_handler, parse_log_level

__all__: list[str] = [
    "configure_logging",
    "install_handler",
    "load_config",
    "parse_log_level",
]
