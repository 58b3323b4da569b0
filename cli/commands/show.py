"""
Show command - rich view of a bank or a single voice.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.commands.loader import load_dump
from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_bank_info, display_voice_detail

console = Console()
app = typer.Typer()


@app.command()
def show(
    file: Path = typer.Argument(..., help="DX7 bulk dump (.syx)"),
    voice: Optional[int] = typer.Argument(None, help="Voice number (1-32); omit for the whole bank"),
    hex_dump: bool = typer.Option(False, "--hex", "-x", help="Also show the raw voice record"),
) -> None:
    """
    Show a bank overview, or one voice in detail.

    Examples:

        dx7dump show rom1a.syx

        dx7dump show rom1a.syx 7 --hex
    """
    dump = load_dump(file)

    if voice is None:
        display_bank_info(dump, str(file))
        return

    try:
        selected = dump.voice(voice)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    display_voice_detail(selected)

    if hex_dump:
        display_hex_dump(selected.raw, title=f"Voice {selected.number:02d} Record")


if __name__ == "__main__":
    app()
