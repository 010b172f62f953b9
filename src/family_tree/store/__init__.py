# src/family_tree/store/__init__.py

"""
Node storage for family trees.

    from family_tree.store import Node, NodeStore
"""

from __future__ import annotations

from .node_store import Node, NodeStore

__all__ = [
    "Node",
    "NodeStore",
]
