from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from family_tree.cli.utils import load_tree, reporting_errors

console = Console()


def mrca_command(
    tree_file: Path = typer.Argument(..., help="Family tree text file"),
    name1: str = typer.Argument(..., help="First name"),
    name2: str = typer.Argument(..., help="Second name"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and INFO log messages",
    ),
):
    """
    Find the most recent common ancestor of two names.
    """
    with reporting_errors():
        tree = load_tree(tree_file, verbose=verbose)
        ancestor = tree.most_recent_common_ancestor(name1, name2)

    if ancestor is None:
        console.print(f"{escape(name1)} and {escape(name2)} have no common ancestor")
        raise typer.Exit(code=1)

    console.print(
        f"Most recent common ancestor of {escape(name1)} and {escape(name2)} "
        f"is {escape(ancestor.name)}",
        soft_wrap=True,
    )
