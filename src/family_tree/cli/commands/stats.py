from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from family_tree.cli.utils import load_tree, reporting_errors

console = Console()


def stats_command(
    tree_file: Path = typer.Argument(..., help="Family tree text file"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and INFO log messages",
    ),
):
    """
    Show summary statistics for a family tree file.
    """
    with reporting_errors():
        tree = load_tree(tree_file, verbose=verbose)

    leaves = [node.handle for node in tree.store if not node.children]
    generations = max((tree.store.depth(h) + 1 for h in leaves), default=0)
    duplicates = tree.duplicate_names()

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Root", tree.root.name if tree.root else "-")
    table.add_row("Nodes", str(len(tree)))
    table.add_row("Generations", str(generations))
    table.add_row("Leaves", str(len(leaves)))
    table.add_row("Duplicate names", ", ".join(duplicates) or "-")

    console.print(table)
