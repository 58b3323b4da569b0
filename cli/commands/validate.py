"""
Validate command - check bulk dump framing and checksum.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from dx7dump.utils.validation import (
    CHECKSUM_OFFSET,
    DUMP_SIZE,
    HEADER_SIZE,
    HeaderCheck,
    ValidationResult,
    validate_bulk_dump,
)
from cli.commands.loader import read_file

console = Console()
app = typer.Typer()


def display_validation(result: ValidationResult, filepath: str, data: bytes) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    content = (
        f"[bold]File:[/bold] {escape(filepath)}\n"
        f"[bold]Size:[/bold] {len(data)} bytes\n"
        f"[bold]Status:[/bold] {status}"
    )
    if not result.valid:
        content += f"\n[bold]Reason:[/bold] {escape(result.reason)}"
    if result.expected_checksum is not None:
        content += f"\n[bold]Expected Checksum:[/bold] 0x{result.expected_checksum:02X}"

    console.print(
        Panel(
            content,
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    # Framing bytes can only be shown when the size is right
    if len(data) != DUMP_SIZE:
        return

    table = Table(title="Framing", box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Check", width=28)
    table.add_column("Value", width=10)

    for check in HeaderCheck:
        if check == HeaderCheck.BYTE_COUNT:
            value = f"{data[4]:02X} {data[5]:02X}"
        else:
            value = f"{data[check.offset]:02X}"
        table.add_row(f"0x{check.offset:04X}", check.description, value)

    table.add_row(f"0x{CHECKSUM_OFFSET:04X}", "checksum", f"{data[CHECKSUM_OFFSET]:02X}")
    table.add_row(f"0x{HEADER_SIZE:04X}", "voice data", f"{CHECKSUM_OFFSET - HEADER_SIZE} bytes")

    console.print(table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="DX7 bulk dump (.syx) to validate"),
) -> None:
    """
    Validate a DX7 32-voice bulk dump.

    Checks for:

    - Correct file size (4104 bytes)
    - SysEx start/end, Yamaha ID, channel, format and byte count
    - Checksum over the voice data

    Examples:

        dx7dump validate rom1a.syx
    """
    data = read_file(file)

    result = validate_bulk_dump(data)

    display_validation(result, str(file), data)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
