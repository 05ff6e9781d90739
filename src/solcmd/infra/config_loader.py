"""Infrastructure: JSON config file loading.

Reads one file per invocation — nothing is cached.  Without a model the
parsed JSON is returned as-is (no schema enforcement); with a pydantic
model the data is validated into an instance of that model.

Rules
-----
* Synchronous read, UTF-8 only.
* Every ``OSError``, ``json.JSONDecodeError`` and
  ``pydantic.ValidationError`` is re-raised as a
  :class:`~solcmd.exceptions.ConfigError` subclass.
* No ``print()`` — the CLI layer renders errors.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from solcmd.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
)

logger = logging.getLogger(__name__)


def read_config_text(path: str | os.PathLike[str]) -> str:
    """Return the raw contents of the config file at *path*.

    Raises
    ------
    ConfigNotFoundError
        When nothing exists at *path*.
    ConfigReadError
        When *path* exists but cannot be read (directory, permissions).
    """
    config_file = Path(path)
    if not config_file.exists():
        logger.error("Config file at path '%s' does not exist", path)
        raise ConfigNotFoundError(
            str(path),
            hint="Check the value passed to -cp/--config-path.",
        )

    try:
        return config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(
            f"Config file at path '{path}' could not be read: {exc.strerror or exc}",
        ) from exc


def parse_config_text(text: str, *, path: str | os.PathLike[str] = "<string>") -> Any:
    """Decode *text* as JSON, mapping decode errors to :class:`ConfigParseError`."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(
            f"Config file at path '{path}' is not valid JSON: "
            f"{exc.msg} (line {exc.lineno}, column {exc.colno})",
        ) from exc


def validate_config(data: Any, model: type[BaseModel], *, path: str | os.PathLike[str] = "<string>") -> BaseModel:
    """Validate decoded JSON *data* into an instance of *model*."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(
            f"Config file at path '{path}' does not match {model.__name__} "
            f"({exc.error_count()} validation error(s))",
            hint=str(exc),
        ) from exc


def load_config(path: str | os.PathLike[str], model: type[BaseModel] | None = None) -> Any:
    """Load the JSON config file at *path*.

    Parameters
    ----------
    path:
        Location of the config file, usually the ``--config-path`` value.
    model:
        Optional pydantic model.  When given, the decoded JSON is validated
        into an instance of it; otherwise the decoded value is returned
        unchanged (normally a ``dict``).

    Raises
    ------
    ConfigNotFoundError
        ``Config file does not exist at path '<path>'``.
    ConfigReadError
        The path exists but is not a readable file.
    ConfigParseError
        The contents are not valid JSON.
    ConfigValidationError
        The contents do not satisfy *model*.
    """
    text = read_config_text(path)
    data = parse_config_text(text, path=path)
    logger.debug("Loaded config from '%s'", path)

    if model is None:
        return data
    return validate_config(data, model, path=path)
