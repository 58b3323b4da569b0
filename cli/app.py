"""
DX7Dump - Decode and inspect Yamaha DX7 32-voice bulk dumps.

A CLI tool for listing, validating and comparing DX7 patch banks.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from dx7dump import __version__
from cli.commands.listing import list_voices
from cli.commands.show import show
from cli.commands.validate import validate
from cli.commands.duplicates import duplicates

console = Console()

# Main app
app = typer.Typer(
    name="dx7dump",
    help="Decode and inspect Yamaha DX7 32-voice bulk dump files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="list")(list_voices)
app.command(name="show")(show)
app.command(name="validate")(validate)
app.command(name="duplicates")(duplicates)


def setup_logging(verbose: bool) -> None:
    """Route library log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]dx7dump[/bold] version {__version__}")
    console.print("[dim]Yamaha DX7 Sysex Dump[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    DX7Dump - Decode and inspect Yamaha DX7 patch banks.

    Reads 32-voice bulk dump SysEx files (.syx, 4104 bytes).

    [bold]Quick Start:[/bold]

        dx7dump list rom1a.syx            # Voice names
        dx7dump list rom1a.syx --long     # Every parameter, diff friendly
        dx7dump list rom1a.syx -p 3       # Every parameter of voice 3

    [bold]Analysis Commands:[/bold]

        dx7dump show rom1a.syx            # Bank overview
        dx7dump show rom1a.syx 3          # One voice in detail
        dx7dump duplicates rom1a.syx      # Voices with identical parameters
        dx7dump validate rom1a.syx        # Check framing and checksum

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
