# src/family_tree/builder/tree_builder.py

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from family_tree.core.exceptions import FormatError, NotFoundError
from family_tree.logging import get_logger
from family_tree.store import Node, NodeStore

log = get_logger(__name__)

SEPARATOR = ":"
CHILD_DELIMITER = ","
INDENT = "  "


class BuildState(Enum):
    EMPTY = "empty"
    ROOTED = "rooted"


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def split_line(raw_line: str, lineno: int = 0) -> Tuple[str, List[str]]:
    """
    Split ``"Parent: Child1, Child2"`` into ``("Parent", ["Child1", "Child2"])``.

    The separator is the first ':' on the line. Names are trimmed and empty
    child tokens are dropped, so ``"Parent:"`` yields no children. An empty
    parent name is returned as ``""``; the tree decides whether it is valid.
    """
    line = _strip_eol(raw_line)

    parent, sep, rest = line.partition(SEPARATOR)
    if not sep:
        raise FormatError(f"Invalid line format: {line}", line=line, lineno=lineno)

    parent = parent.strip()
    children = [c.strip() for c in rest.split(CHILD_DELIMITER)]
    return parent, [c for c in children if c]


class FamilyTree:
    """
    A single-rooted tree of names built from ``Parent: Child, ...`` lines.

    Construction is append-only. The first ingested line's parent becomes
    the root (``EMPTY -> ROOTED``); afterwards every parent must already be
    present in the tree.
    """

    def __init__(self) -> None:
        self.store = NodeStore()
        self.state = BuildState.EMPTY
        self._root: Optional[int] = None

    def __len__(self) -> int:
        return len(self.store)

    @property
    def root(self) -> Optional[Node]:
        if self._root is None:
            return None
        return self.store.node(self._root)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def _resolve_parent(self, name: str, lineno: int) -> int:
        if self.state is BuildState.EMPTY:
            self._root = self.store.create_node(name)
            self.state = BuildState.ROOTED
            log.debug("Created root node %r", name)
            return self._root

        handle = self.store.find_by_name(self._root, name)
        if handle is None:
            raise NotFoundError(
                f"Parent node '{name}' not found.", name=name, lineno=lineno
            )
        return handle

    def ingest_line(self, raw_line: str, lineno: int = 0) -> None:
        """
        Add one ``Parent: Child1, Child2`` line to the tree.

        Raises:
            FormatError: the line has no ':'.
            NotFoundError: the tree is rooted and the parent name is unknown.
        """
        parent_name, child_names = split_line(raw_line, lineno=lineno)
        parent = self._resolve_parent(parent_name, lineno)

        for child_name in child_names:
            child = self.store.create_node(child_name)
            self.store.attach_child(parent, child)

        log.debug(
            "Attached %d child(ren) to %r", len(child_names), parent_name
        )

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find(self, name: str) -> Optional[Node]:
        """Return the first node named ``name`` in pre-order, or None."""
        if self._root is None:
            return None
        handle = self.store.find_by_name(self._root, name)
        return None if handle is None else self.store.node(handle)

    def _require(self, name: str) -> Node:
        node = self.find(name)
        if node is None:
            raise NotFoundError(f"Node with name '{name}' not found.", name=name)
        return node

    def ancestor_chain(self, name: str) -> List[Node]:
        """Return the nodes from ``name`` up to the root, both inclusive."""
        node = self._require(name)
        return [self.store.node(h) for h in self.store.collect_ancestor_chain(node.handle)]

    def most_recent_common_ancestor(self, name1: str, name2: str) -> Optional[Node]:
        """
        Return the closest node that is an ancestor of (or equal to) both names.

        Walks the first node's ancestor chain and returns the first member that
        also appears in the second chain. Returns None only for chains that never
        meet, which a single-rooted tree cannot produce.
        """
        node1 = self._require(name1)
        node2 = self._require(name2)

        ancestors_of_1 = self.store.collect_ancestor_chain(node1.handle)
        ancestors_of_2 = set(self.store.collect_ancestor_chain(node2.handle))

        for handle in ancestors_of_1:
            if handle in ancestors_of_2:
                return self.store.node(handle)

        log.warning("No common ancestor for %r and %r", name1, name2)
        return None

    def render(self) -> Iterator[Tuple[int, str]]:
        """Yield ``(depth, name)`` for every node in pre-order."""
        if self._root is None:
            return iter(())
        return self.store.render(self._root, 0)

    def duplicate_names(self) -> List[str]:
        """Names carried by more than one node, in first-seen order."""
        if self._root is None:
            return []
        counts: Dict[str, int] = {}
        for handle in self.store.iter_subtree(self._root):
            name = self.store.node(handle).name
            counts[name] = counts.get(name, 0) + 1
        return [name for name, count in counts.items() if count > 1]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        root = self.root.name if self.root else None
        return f"<FamilyTree root={root!r} nodes={len(self)}>"


def build_tree(lines: Iterable[str]) -> FamilyTree:
    """
    Build a FamilyTree from lines supplied in order.

    Line numbers are 1-based and only used for error messages. Lines that
    were ingested before a failing line stay in the tree, but the tree is
    not returned; callers needing the partial tree should drive
    ``FamilyTree.ingest_line`` themselves.
    """
    tree = FamilyTree()
    for lineno, line in enumerate(lines, start=1):
        tree.ingest_line(line, lineno=lineno)
    return tree


def format_tree(tree: FamilyTree) -> str:
    """Human-readable dump: a header, then one indented name per line."""
    lines = [f"{INDENT * depth}{name}" for depth, name in tree.render()]
    body = "".join(f"{line}\n" for line in lines)
    return f"Family Tree:\n\n{body}"
