"""
Bulk dump data model.
"""

from dataclasses import dataclass, field
from typing import Tuple

from dx7dump.models.voice import Voice


@dataclass(frozen=True)
class BulkDumpHeader:
    """
    The six framing bytes in front of the voice data.

    Attributes:
        sysex_start: 0xF0
        manufacturer_id: 0x43 (Yamaha)
        sub_status_channel: Sub-status (high nibble) and channel (low nibble)
        format_id: 0x09 for 32 voices
        size_msb: Byte count MSB (0x20)
        size_lsb: Byte count LSB (0x00)
    """

    sysex_start: int
    manufacturer_id: int
    sub_status_channel: int
    format_id: int
    size_msb: int
    size_lsb: int

    @property
    def byte_count(self) -> int:
        """Declared payload size; each size byte carries 7 bits."""
        return (self.size_msb << 7) | self.size_lsb

    @property
    def channel(self) -> int:
        """MIDI channel (1-16)."""
        return (self.sub_status_channel & 0x0F) + 1


@dataclass(frozen=True)
class BulkDump:
    """
    A decoded DX7 32-voice bulk dump.

    Only ever built from a buffer that passed validation.

    Attributes:
        header: Framing bytes
        voices: The 32 voices, voice 1 first
        checksum: Stored checksum byte
        sysex_end: 0xF7
    """

    header: BulkDumpHeader
    voices: Tuple[Voice, ...]
    checksum: int
    sysex_end: int
    _raw_data: bytes = field(default=b"", repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.voices)

    def voice(self, number: int) -> Voice:
        """
        Get a voice by its 1-based number.

        Args:
            number: Voice number (1-32)

        Returns:
            The voice

        Raises:
            ValueError: If number is outside the bank
        """
        if not 1 <= number <= len(self.voices):
            raise ValueError(f"Voice number must be 1-{len(self.voices)}, got {number}")
        return self.voices[number - 1]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(v.name for v in self.voices)
