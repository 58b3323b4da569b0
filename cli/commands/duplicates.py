"""
Duplicates command - find voices with identical parameters.
"""

from pathlib import Path

import typer

from dx7dump.analysis.duplicates import find_duplicates
from cli.commands.loader import load_dump
from cli.display.tables import display_duplicates

app = typer.Typer()


@app.command()
def duplicates(
    file: Path = typer.Argument(..., help="DX7 bulk dump (.syx)"),
) -> None:
    """
    Find voices whose parameters match exactly, ignoring names.

    Examples:

        dx7dump duplicates rom1a.syx
    """
    dump = load_dump(file)
    display_duplicates(find_duplicates(dump), dump)


if __name__ == "__main__":
    app()
