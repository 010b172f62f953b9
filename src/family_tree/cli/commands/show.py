from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from family_tree.builder import format_tree
from family_tree.cli.utils import build_rich_tree, load_tree, reporting_errors

console = Console()


def show_command(
    tree_file: Path = typer.Argument(..., help="Family tree text file"),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print the indented text dump instead of a rich tree",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing and INFO log messages",
    ),
):
    """
    Print the whole family tree.
    """
    with reporting_errors():
        tree = load_tree(tree_file, verbose=verbose)

    if plain:
        typer.echo(format_tree(tree), nl=False)
    else:
        console.print(build_rich_tree(tree))
