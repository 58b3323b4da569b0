"""
Shared file loading for CLI commands.

Reads a bulk dump file and turns every failure into a printed error and
exit code 1.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dx7dump.formats.dx7.reader import DX7BulkReader
from dx7dump.models.dump import BulkDump
from dx7dump.utils.validation import DumpValidationError, ErrorKind

console = Console()


def read_file(file: Path) -> bytes:
    """
    Read a file's bytes, exiting with status 1 if it cannot be read.

    Args:
        file: Path to .syx file

    Returns:
        File contents
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    try:
        with open(file, "rb") as f:
            return f.read()
    except OSError as e:
        console.print(
            f"[red]Error: Can't open {escape(str(file))}: {escape(e.strerror or str(e))}[/red]",
            soft_wrap=True,
        )
        raise typer.Exit(1)


def load_dump(file: Path) -> BulkDump:
    """
    Read and decode a bulk dump, exiting with status 1 on any failure.

    Args:
        file: Path to .syx file

    Returns:
        Decoded BulkDump
    """
    data = read_file(file)

    try:
        return DX7BulkReader().parse_bytes(data)
    except DumpValidationError as e:
        if e.kind == ErrorKind.SIZE_MISMATCH:
            console.print(
                f"[red]Error: {escape(str(file))} does not match the expected size of a sysex file.[/red]",
                soft_wrap=True,
            )
        else:
            console.print(f"[yellow]{escape(str(e))}.[/yellow]", soft_wrap=True)
            console.print(
                f"[red]Error: {escape(str(file))} is not a valid sysex file.[/red]",
                soft_wrap=True,
            )
        raise typer.Exit(1)
