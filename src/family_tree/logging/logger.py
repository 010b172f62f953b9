"""
Logging setup for the family tree project.

Key behaviors
-------------
* ``get_logger(__name__)`` hands out children of the ``family_tree`` logger,
  which owns a single console handler (WARNING, or DEBUG when ``debug`` is set).
* Importing the library never writes files. ``configure_logging`` is called by
  the CLI and adds the file handler from ``logging.file`` / ``logging.dir``,
  resolved against the working directory, with optional rotation.
* ``verbose`` lowers the console threshold to INFO for one CLI run.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from family_tree.config import FTConfig, get_config

BASE_LOGGER_NAME = "family_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_console: Optional[logging.Handler] = None
_file_handler: Optional[logging.Handler] = None


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _apply_levels(base: Logger, cfg: FTConfig, verbose: bool) -> None:
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    if cfg.debug:
        console_level = file_level = logging.DEBUG
    elif verbose:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    base.setLevel(min(console_level, file_level))
    _console.setLevel(console_level)
    if _file_handler is not None:
        _file_handler.setLevel(file_level)


def _base_logger() -> Logger:
    """Install the console handler on first use."""
    global _console

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _console is None:
        _console = StreamHandler()
        _console.setFormatter(_formatter())
        base.addHandler(_console)
        base.propagate = False
        _apply_levels(base, get_config(), verbose=False)
    return base


def _build_file_handler(path: Path, rotate: bool) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setFormatter(_formatter())
    return handler


def configure_logging(cfg: FTConfig | None = None, *, verbose: bool = False) -> Logger:
    """Apply ``cfg`` (default: the loaded config) to the shared logger.

    Replaces any previous file handler, so calling it again with another
    config moves or removes the log file.
    """
    global _file_handler

    cfg = cfg or get_config()
    base = _base_logger()

    if _file_handler is not None:
        base.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    log_file = cfg.log_file
    if log_file is not None:
        if not log_file.is_absolute():
            log_file = Path.cwd() / log_file
        _file_handler = _build_file_handler(log_file, bool(cfg.logging.get("rotate", False)))
        base.addHandler(_file_handler)

    _apply_levels(base, cfg, verbose)
    return base


def get_logger(name: str | None = None) -> Logger:
    """Return ``name`` as a logger below the shared ``family_tree`` logger."""
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
