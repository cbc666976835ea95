"""Logging setup for the icon build hook.

Build systems usually run the hook without passing flags, so the level can
also come from ``$FLUENT_ICONS_LOG`` (a level name such as ``debug`` or
``warning``). Explicit ``verbose``/``quiet`` arguments take precedence.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

_LOGGER_NAME = "fluent_icons"
LOG_LEVEL_ENV = "FLUENT_ICONS_LOG"

_CONSOLE_FORMAT = "[fluent-icons] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger, e.g. ``get_logger("retriever")``."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def resolve_level(
    *,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    env = os.environ if environ is None else environ
    requested = env.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(requested) if requested else None
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Install console (and optional file) handlers on the fluent_icons logger."""
    level = resolve_level(verbose=verbose, quiet=quiet, environ=environ)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Build hooks may run the entry point more than once per process.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # The file sink keeps full detail even when the console is quiet.
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        console.setLevel(level)
        logger.setLevel(min(level, logging.DEBUG))
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOG_LEVEL_ENV", "configure_logging", "get_logger", "resolve_level"]
