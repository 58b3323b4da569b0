"""
List command - print voices as plain text.

The long listing puts one parameter per line so the output of two banks
can be compared with diff or meld.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from dx7dump.analysis.duplicates import find_duplicates
from dx7dump.formats.dx7.reader import select_voices
from cli.commands.loader import load_dump
from cli.display.formatters import format_duplicate, format_voice_long, format_voice_short

app = typer.Typer()


@dataclass
class ListingOptions:
    """Display directives for a listing."""

    long: bool = False
    patch: Optional[int] = None
    find_duplicates: bool = False

    def __post_init__(self):
        # Picking a single patch always shows all of its parameters
        if self.patch is not None:
            self.long = True


def print_listing(file: Path, options: ListingOptions) -> None:
    """Print the listing for a file according to the display directives."""
    dump = load_dump(file)

    try:
        voices = select_voices(dump, options.patch)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for voice in voices:
        if not options.long:
            typer.echo(format_voice_short(voice))
            continue

        for line in format_voice_long(voice, str(file)):
            typer.echo(line)

    if options.find_duplicates:
        for first, second in find_duplicates(dump):
            typer.echo(format_duplicate(first, second))


@app.command()
def list_voices(
    file: Path = typer.Argument(..., help="DX7 bulk dump (.syx) to list"),
    long: bool = typer.Option(False, "--long", "-l", help="List all parameters for all 32 patches"),
    patch: Optional[int] = typer.Option(
        None, "--patch", "-p", help="List all parameters for the specified patch (1-32)"
    ),
    find_dups: bool = typer.Option(
        False, "--find-duplicates", "-f", help="Report voices with identical parameters"
    ),
) -> None:
    """
    List the voices in a DX7 bulk dump.

    Examples:

        dx7dump list rom1a.syx

        dx7dump list rom1a.syx --long > rom1a.txt

        dx7dump list rom1a.syx -p 12

        dx7dump list rom1a.syx -f
    """
    print_listing(file, ListingOptions(long=long, patch=patch, find_duplicates=find_dups))


if __name__ == "__main__":
    app()
