# src/family_tree/builder/__init__.py

"""
Tree construction and MRCA queries.

    from family_tree.builder import FamilyTree, build_tree, format_tree
"""

from __future__ import annotations

from .tree_builder import BuildState, FamilyTree, build_tree, format_tree, split_line

__all__ = [
    "BuildState",
    "FamilyTree",
    "build_tree",
    "format_tree",
    "split_line",
]
