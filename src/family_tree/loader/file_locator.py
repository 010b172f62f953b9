"""
File Locator

Resolves absolute, validated paths to family tree text files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from family_tree.config import get_config
from family_tree.logging import get_logger

log = get_logger(__name__)


def _data_dir() -> Path:
    data_dir = Path(get_config().data_dir)
    if not data_dir.is_absolute():
        data_dir = Path.cwd() / data_dir
    return data_dir


def resolve_input_path(
    path: Union[str, Path],
    data_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Convert a user-provided path into an absolute validated file path.

    Relative paths missing from the working directory are looked up under
    the data directory (``paths.data_dir`` in the config, unless ``data_dir``
    is given).

    Raises:
        FileNotFoundError: if the file exists in neither location.
        ValueError: if the path points at something that is not a file.
    """
    candidate = Path(path)
    abs_path = Path(os.path.abspath(candidate))
    log.debug(f"Resolving input file: {abs_path}")

    if not abs_path.exists() and not candidate.is_absolute():
        base = Path(data_dir) if data_dir is not None else _data_dir()
        fallback = Path(os.path.abspath(base / candidate))
        if fallback.exists():
            log.debug(f"Found {candidate} under data directory {base}")
            abs_path = fallback

    if not abs_path.exists():
        log.error(f"Input file does not exist: {abs_path}")
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not abs_path.is_file():
        log.error(f"Input path is not a file: {abs_path}")
        raise ValueError(f"Input path is not a file: {abs_path}")

    log.debug(f"Validated input file: {abs_path}")
    return abs_path
