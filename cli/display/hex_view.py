"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.panel import Panel

console = Console()


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
) -> None:
    """Display formatted hex dump of a voice record with Rich."""

    lines = []

    for offset in range(0, len(data), bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append(" ")  # Extra space at midpoint
            hex_parts.append(f"{b:02X}")
        hex_str = " ".join(hex_parts)

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        addr = start_offset + offset

        lines.append(
            f"[dim]{addr:04X}[/dim]  {hex_str:<{bytes_per_line * 3 + 2}}  [cyan]{ascii_str}[/cyan]"
        )

    content = "\n".join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
