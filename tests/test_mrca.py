# tests/test_mrca.py

from __future__ import annotations

import itertools

import pytest

from family_tree.builder import FamilyTree, build_tree
from family_tree.core.exceptions import NotFoundError

HOBBIT_LINES = [
    "Bungo: Bilbo",
    "Bilbo: Frodo, Drogo",
    "Frodo: Sam, Merry",
    "Drogo: Pippin",
]
HOBBIT_NAMES = ["Bungo", "Bilbo", "Frodo", "Drogo", "Sam", "Merry", "Pippin"]


@pytest.fixture
def hobbits() -> FamilyTree:
    return build_tree(HOBBIT_LINES)


def test_ancestor_is_common_ancestor_of_descendant() -> None:
    tree = build_tree(["Bilbo: Frodo", "Frodo: Sam"])

    ancestor = tree.most_recent_common_ancestor("Bilbo", "Sam")

    assert ancestor.name == "Bilbo"
    assert ancestor is tree.root


def test_siblings_share_parent() -> None:
    tree = build_tree(["A: B, C"])
    assert tree.most_recent_common_ancestor("B", "C").name == "A"


@pytest.mark.parametrize(
    "name1,name2,expected",
    [
        ("Sam", "Merry", "Frodo"),
        ("Sam", "Pippin", "Bilbo"),
        ("Merry", "Drogo", "Bilbo"),
        ("Frodo", "Sam", "Frodo"),
        ("Bungo", "Pippin", "Bungo"),
    ],
)
def test_mrca_in_deeper_tree(hobbits, name1, name2, expected) -> None:
    assert hobbits.most_recent_common_ancestor(name1, name2).name == expected


@pytest.mark.parametrize("name", HOBBIT_NAMES)
def test_mrca_of_node_with_itself_is_the_node(hobbits, name) -> None:
    node = hobbits.find(name)
    assert hobbits.most_recent_common_ancestor(name, name) is node


def test_mrca_is_symmetric(hobbits) -> None:
    for a, b in itertools.combinations(HOBBIT_NAMES, 2):
        forward = hobbits.most_recent_common_ancestor(a, b)
        backward = hobbits.most_recent_common_ancestor(b, a)
        assert forward is backward, (a, b)


def test_mrca_unknown_name_raises(hobbits) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        hobbits.most_recent_common_ancestor("Bilbo", "Gandalf")
    assert excinfo.value.name == "Gandalf"
    assert "Gandalf" in str(excinfo.value)

    with pytest.raises(NotFoundError):
        hobbits.most_recent_common_ancestor("Smeagol", "Bilbo")


def test_mrca_on_empty_tree_raises() -> None:
    with pytest.raises(NotFoundError):
        FamilyTree().most_recent_common_ancestor("A", "A")


def test_mrca_uses_first_match_for_duplicate_names() -> None:
    tree = build_tree(["A: B, C", "B: John", "C: John, Mary"])
    # "John" resolves to B's child, so the answer climbs to A
    assert tree.most_recent_common_ancestor("John", "Mary").name == "A"


def test_mrca_returns_none_when_chains_never_meet() -> None:
    tree = build_tree(["A: B"])
    # A detached node can only appear through direct store manipulation
    stray = tree.store.create_node("Stray")
    tree.store.attach_child(stray, tree.store.create_node("Orphan"))
    tree.store.node(tree.root.children[0]).children.append(stray)

    assert tree.most_recent_common_ancestor("B", "Orphan") is None


def test_ancestor_chain_by_name(hobbits) -> None:
    chain = hobbits.ancestor_chain("Pippin")
    assert [n.name for n in chain] == ["Pippin", "Drogo", "Bilbo", "Bungo"]
