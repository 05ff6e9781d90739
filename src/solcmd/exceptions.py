"""Custom exception hierarchy for solcmd.

All exceptions raised by the library inherit from :class:`SolcmdError`.
Raw exceptions from ``json``, ``pydantic``, ``logging`` or the
filesystem must be caught at the point of use and re-raised as a typed
subclass defined here, chained with ``from``.

Hierarchy
---------
SolcmdError
├── ConfigError
│   ├── ConfigNotFoundError
│   ├── ConfigReadError
│   ├── ConfigParseError
│   ├── ConfigValidationError
│   └── MissingConfigPathError
├── InvalidLogLevelError
├── CommandDefinitionError
│   └── DuplicateCommandError
└── EnvironmentError
"""

from __future__ import annotations


class SolcmdError(Exception):
    """Base exception for all solcmd errors.

    The CLI error boundary renders any subclass as a one-line message
    followed by the optional hint, then exits with ``GENERAL_ERROR``.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Config file -----------------------------------------------------------

class ConfigError(SolcmdError):
    """Base class for failures while resolving a command's config file."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config path does not exist on disk."""

    def __init__(self, path: str, *, hint: str | None = None) -> None:
        super().__init__(f"Config file does not exist at path '{path}'", hint=hint)
        self.path: str = path


class ConfigReadError(ConfigError):
    """Raised when the config path exists but cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid JSON."""


class ConfigValidationError(ConfigError):
    """Raised when the config does not match the command's declared model."""


class MissingConfigPathError(ConfigError):
    """Raised when a config-aware command runs without ``--config-path``."""


# --- Logging ---------------------------------------------------------------

class InvalidLogLevelError(SolcmdError):
    """Raised when ``logging`` rejects the requested ``--log-level``."""


# --- Command declaration ---------------------------------------------------

class CommandDefinitionError(SolcmdError):
    """Raised when a command is declared inconsistently."""


class DuplicateCommandError(CommandDefinitionError):
    """Raised when two commands with the same name join one program."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SolcmdError):
    """Raised when a required runtime dependency is not available."""
