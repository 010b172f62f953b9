from __future__ import annotations

import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from family_tree.builder import FamilyTree
from family_tree.core.exceptions import TreeError
from family_tree.loader import load_tree_file
from family_tree.logging import configure_logging

console = Console()


def load_tree(path: Path, *, verbose: bool = False) -> FamilyTree:
    """
    Resolve, read and build a family tree file.
    """
    configure_logging(verbose=verbose)
    t0 = time.perf_counter()

    tree = load_tree_file(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {len(tree)} node(s) in {elapsed:.3f}s")

    return tree


@contextmanager
def reporting_errors() -> Iterator[None]:
    """
    Turn tree and IO failures into a one-line diagnostic and exit code 1.
    """
    try:
        yield
    except TreeError as exc:
        console.print(f"Input file trouble: {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc
    except (OSError, ValueError) as exc:
        console.print(f"IO trouble: {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc


def build_rich_tree(tree: FamilyTree) -> Tree:
    """
    Convert the pre-order ``(depth, name)`` rendering into a rich Tree.
    """
    rich_root = Tree("[bold]Family Tree[/bold]")
    # branches[d] is the branch that receives nodes at depth d
    branches = [rich_root]

    for depth, name in tree.render():
        del branches[depth + 1:]
        branch = branches[depth].add(escape(name))
        branches.append(branch)

    return rich_root
