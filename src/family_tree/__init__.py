"""
family_tree: build a tree of names from ``Parent: Child, ...`` lines and
answer most-recent-common-ancestor queries.
"""

from family_tree.builder import FamilyTree, build_tree, format_tree
from family_tree.core.exceptions import FormatError, NotFoundError, TreeError
from family_tree.store import Node, NodeStore

__all__ = [
    "FamilyTree",
    "FormatError",
    "Node",
    "NodeStore",
    "NotFoundError",
    "TreeError",
    "build_tree",
    "format_tree",
]

__version__ = "0.1.0"
