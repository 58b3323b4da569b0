"""
Rich table displays for DX7 banks and voices.
"""

from typing import List, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from dx7dump.models.dump import BulkDump
from dx7dump.models.voice import Voice
from cli.display.formatters import format_frequency_coarse, value_bar


console = Console()


def display_bank_info(dump: BulkDump, filepath: str) -> None:
    """Display the bank header and a table of its voices."""
    header = dump.header

    header_content = f"""[bold]File:[/bold] {escape(filepath)}
[bold]Format:[/bold] 0x{header.format_id:02X} (32 voices)
[bold]Channel:[/bold] {header.channel}
[bold]Byte Count:[/bold] {header.byte_count}
[bold]Checksum:[/bold] 0x{dump.checksum:02X}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]DX7 Bulk Dump[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    table = Table(title="Voices", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style="cyan", width=12)
    table.add_column("Alg", width=4)
    table.add_column("FB", width=3)
    table.add_column("LFO Wave", width=16)
    table.add_column("Transpose", width=10)

    for voice in dump.voices:
        table.add_row(
            f"{voice.number:02d}",
            escape(voice.name),
            str(voice.algorithm_number),
            str(voice.feedback),
            str(voice.lfo_wave_label),
            str(voice.transpose_label),
        )

    console.print(table)


def display_voice_detail(voice: Voice) -> None:
    """Display one voice: global parameters panel and operator table."""
    global_content = f"""[bold]Algorithm:[/bold] {voice.algorithm_number}
[bold]Feedback:[/bold] {voice.feedback}
[bold]Osc Key Sync:[/bold] {voice.oscillator_key_sync_label}
[bold]Transpose:[/bold] {voice.transpose_label}
[bold]Pitch EG:[/bold] R {' '.join(f'{r:02d}' for r in voice.pitch_eg_rates)}  L {' '.join(f'{lv:02d}' for lv in voice.pitch_eg_levels)}
[bold]LFO:[/bold] {voice.lfo_wave_label}, rate {voice.lfo_rate}, delay {voice.lfo_delay}, PMD {voice.lfo_pitch_modulation_depth}, AMD {voice.lfo_amplitude_modulation_depth}, PMS {voice.lfo_pitch_modulation_sensitivity}, sync {voice.lfo_key_sync_label}"""

    console.print(
        Panel(
            global_content,
            title=f"[bold blue]Voice {voice.number:02d}: {escape(voice.name)}[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    table = Table(title="Operators", box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("Op", style="dim", width=3)
    table.add_column("Output", width=16)
    table.add_column("Mode", width=6)
    table.add_column("Coarse", width=12)
    table.add_column("Fine", width=4)
    table.add_column("Det", width=3)
    table.add_column("EG Rates", width=11)
    table.add_column("EG Levels", width=11)
    table.add_column("Break Pt", width=8)
    table.add_column("Curves", width=10)

    for op in voice.operators:
        table.add_row(
            str(op.number),
            value_bar(op.output_level),
            str(op.mode_label),
            format_frequency_coarse(op),
            str(op.frequency_fine),
            str(op.detune),
            " ".join(f"{r:02d}" for r in op.eg_rates),
            " ".join(f"{lv:02d}" for lv in op.eg_levels),
            str(op.break_point_label),
            f"{op.left_curve_label} {op.right_curve_label}",
        )

    console.print(table)


def display_duplicates(pairs: List[Tuple[int, int]], dump: BulkDump) -> None:
    """Display duplicate voice pairs with their names."""
    if not pairs:
        console.print("[green]No duplicate voices found.[/green]")
        return

    table = Table(
        title="Duplicate Voices", box=box.ROUNDED, show_header=True, header_style="bold yellow"
    )
    table.add_column("Voice", width=5)
    table.add_column("Name", style="cyan", width=12)
    table.add_column("Duplicate", width=9)
    table.add_column("Name", style="cyan", width=12)

    for first, second in pairs:
        table.add_row(
            f"{first:02d}",
            escape(dump.voice(first).name),
            f"{second:02d}",
            escape(dump.voice(second).name),
        )

    console.print(table)
