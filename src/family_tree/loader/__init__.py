# src/family_tree/loader/__init__.py

"""
Public interface for reading family tree text files.

    from family_tree.loader import (
        resolve_input_path,
        iter_tree_lines,
        load_tree_file,
    )
"""

from __future__ import annotations

from .file_loader import iter_tree_lines, load_tree_file
from .file_locator import resolve_input_path

__all__ = [
    "iter_tree_lines",
    "load_tree_file",
    "resolve_input_path",
]
