# src/family_tree/store/node_store.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass
class Node:
    """
    One named individual in the tree.

    Attributes:
        handle: Stable index of this node inside its NodeStore.
        name: The individual's name (not guaranteed unique).
        parent: Handle of the parent node, or None for the root.
        children: Child handles in insertion order.
    """

    handle: int
    name: str
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"<Node #{self.handle} {self.name!r} children={len(self.children)}>"


class NodeStore:
    """
    Arena owning every node of a tree.

    Nodes reference each other by integer handle only, so the store is the
    single owner of node lifetime and no parent/child reference cycles exist.
    Nodes are append-only: they are never removed or re-parented.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def node(self, handle: int) -> Node:
        """Return the node for ``handle``; raises IndexError for unknown handles."""
        if handle < 0:
            raise IndexError(f"Invalid node handle: {handle}")
        return self._nodes[handle]

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def create_node(self, name: str) -> int:
        handle = len(self._nodes)
        self._nodes.append(Node(handle=handle, name=name))
        return handle

    def attach_child(self, parent: int, child: int) -> None:
        parent_node = self.node(parent)
        child_node = self.node(child)
        assert child_node.parent is None, f"{child_node!r} already has a parent"

        child_node.parent = parent
        parent_node.children.append(child)

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def iter_subtree(self, start: int) -> Iterator[int]:
        """Yield ``start`` and all its descendants in pre-order."""
        yield start
        for child in self.node(start).children:
            yield from self.iter_subtree(child)

    def find_by_name(self, start: int, target_name: str) -> Optional[int]:
        """
        Depth-first pre-order search below ``start`` (inclusive).

        Returns the handle of the first node named ``target_name``, or None.
        There is no name index: every lookup walks the subtree.
        """
        node = self.node(start)
        if node.name == target_name:
            return start

        for child in node.children:
            found = self.find_by_name(child, target_name)
            if found is not None:
                return found

        return None

    def collect_ancestor_chain(self, handle: int) -> List[int]:
        """Return ``[handle, parent, grandparent, ..., root]``."""
        chain: List[int] = []
        current: Optional[int] = handle
        while current is not None:
            chain.append(current)
            current = self.node(current).parent
        return chain

    def depth(self, handle: int) -> int:
        return len(self.collect_ancestor_chain(handle)) - 1

    def render(self, handle: int, depth: int = 0) -> Iterator[Tuple[int, str]]:
        """Yield ``(depth, name)`` pairs for the subtree, children one level deeper."""
        node = self.node(handle)
        yield depth, node.name
        for child in node.children:
            yield from self.render(child, depth + 1)
