"""
DX7 bulk dump file reader.

Reads .syx files containing a 32-voice bulk dump and returns the decoded
BulkDump.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from dx7dump.formats.dx7.bulk_parser import BulkDumpParser
from dx7dump.models.dump import BulkDump
from dx7dump.models.voice import Voice


class DX7BulkReader:
    """
    Reader for DX7 32-voice bulk dump files.

    Example:
        dump = DX7BulkReader.read("rom1a.syx")
        for voice in dump.voices:
            print(f"{voice.number:02d}: {voice.name}")
    """

    def __init__(self):
        self.parser = BulkDumpParser()

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> BulkDump:
        """
        Read a DX7 bulk dump file.

        Args:
            filepath: Path to .syx file

        Returns:
            Decoded BulkDump
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> BulkDump:
        """
        Parse a bulk dump file.

        Args:
            filepath: Path to .syx file

        Returns:
            Decoded BulkDump

        Raises:
            FileNotFoundError: If the file does not exist
            DumpValidationError: If the file is not a valid bulk dump
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> BulkDump:
        return self.parser.parse_bytes(data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a DX7 bulk dump.

        Only the size and the first four bytes are checked.

        Args:
            filepath: Path to check

        Returns:
            True if file appears to be a DX7 32-voice dump
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        if filepath.stat().st_size != BulkDumpParser.DUMP_SIZE:
            return False

        with open(filepath, "rb") as f:
            header = f.read(4)

        return header == bytes([0xF0, 0x43, 0x00, 0x09])


def select_voices(dump: BulkDump, patch: Optional[int] = None) -> Tuple[Voice, ...]:
    """
    Pick the voices to display.

    Args:
        dump: Decoded dump
        patch: 1-based voice number, or None for all voices

    Returns:
        Tuple of selected voices
    """
    if patch is None:
        return dump.voices
    return (dump.voice(patch),)
