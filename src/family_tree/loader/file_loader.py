# src/family_tree/loader/file_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple, Union

from family_tree.builder import FamilyTree
from family_tree.logging import get_logger

from .file_locator import resolve_input_path

log = get_logger(__name__)


def iter_tree_lines(path: Union[str, Path]) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` for every non-blank line of a tree file.

    Line numbers are 1-based and count blank lines, so they match what an
    editor shows. Trailing CR/LF is removed and a UTF-8 BOM on the first
    line is dropped.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"Family tree file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, raw_line in enumerate(f, start=1):
            line = raw_line.rstrip("\r\n")
            if lineno == 1:
                line = line.lstrip("\ufeff")

            if not line.strip():
                continue

            yield lineno, line


def load_tree_file(path: Union[str, Path]) -> FamilyTree:
    """
    Resolve ``path`` and build a FamilyTree from its lines.

    Errors from ``FamilyTree.ingest_line`` propagate unchanged and carry
    the offending line number.
    """
    file_path = resolve_input_path(path)
    log.info(f"Loading family tree: {file_path}")

    tree = FamilyTree()
    for lineno, line in iter_tree_lines(file_path):
        tree.ingest_line(line, lineno=lineno)

    log.info(f"Loaded {len(tree)} node(s) from {file_path.name}")
    return tree
