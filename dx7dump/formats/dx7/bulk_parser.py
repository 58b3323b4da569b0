"""
DX7 32-voice bulk dump parser.

Decodes the packed voice data of a validated bulk dump into Voice and
Operator models.

Voice Record Structure (128 bytes):
    Offset  Size    Description
    0       102     Operators 6..1 (17 bytes each, Operator 6 first)
    102     4       Pitch EG rates
    106     4       Pitch EG levels
    110     1       Algorithm (bits 0-4)
    111     1       Feedback (bits 0-2), osc key sync (bit 3)
    112     4       LFO rate, delay, pitch mod depth, amp mod depth
    116     1       LFO key sync (bit 0), wave (bits 1-3), pitch mod sens (bits 4-7)
    117     1       Transpose
    118     10      Name (ASCII, not terminated)

Operator Record Structure (17 bytes):
    Offset  Size    Description
    0       4       EG rates
    4       4       EG levels
    8       1       Level scale break point
    9       2       Level scale left/right depth
    11      1       Left curve (bits 0-1), right curve (bits 2-3)
    12      1       Rate scale (bits 0-2), detune (bits 3-6)
    13      1       AMS (bits 0-1), key velocity sens (bits 2-4)
    14      1       Output level
    15      1       Oscillator mode (bit 0), frequency coarse (bits 1-5)
    16      1       Frequency fine
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from dx7dump.models.dump import BulkDump, BulkDumpHeader
from dx7dump.models.voice import NAME_LENGTH, Operator, Voice
from dx7dump.utils.validation import (
    CHECKSUM_OFFSET,
    DUMP_SIZE,
    END_OFFSET,
    HEADER_SIZE,
    VOICE_COUNT,
    VOICE_SIZE,
    verify_bulk_dump,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BitField:
    """
    Location of one parameter inside a packed record.

    Attributes:
        name: Parameter name
        offset: Byte offset within the record
        shift: Position of the lowest bit within the byte
        width: Number of bits
    """

    name: str
    offset: int
    shift: int = 0
    width: int = 8

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def extract(self, record: bytes) -> int:
        return (record[self.offset] >> self.shift) & self.mask


def unpack_fields(record: bytes, layout: Sequence[BitField]) -> Dict[str, int]:
    """
    Extract every field in a layout from a packed record.

    Args:
        record: Record bytes
        layout: Field descriptions

    Returns:
        Dict mapping field name to its unsigned value
    """
    return {f.name: f.extract(record) for f in layout}


OPERATOR_SIZE = 17
OPERATOR_COUNT = 6

OPERATOR_LAYOUT: List[BitField] = [
    BitField("eg_rate_1", 0),
    BitField("eg_rate_2", 1),
    BitField("eg_rate_3", 2),
    BitField("eg_rate_4", 3),
    BitField("eg_level_1", 4),
    BitField("eg_level_2", 5),
    BitField("eg_level_3", 6),
    BitField("eg_level_4", 7),
    BitField("level_scale_break_point", 8),
    BitField("level_scale_left_depth", 9),
    BitField("level_scale_right_depth", 10),
    BitField("level_scale_left_curve", 11, 0, 2),
    BitField("level_scale_right_curve", 11, 2, 2),
    BitField("oscillator_rate_scale", 12, 0, 3),
    BitField("detune", 12, 3, 4),
    BitField("amplitude_modulation_sensitivity", 13, 0, 2),
    BitField("key_velocity_sensitivity", 13, 2, 3),
    BitField("output_level", 14),
    BitField("oscillator_mode", 15, 0, 1),
    BitField("frequency_coarse", 15, 1, 5),
    BitField("frequency_fine", 16),
]

VOICE_LAYOUT: List[BitField] = [
    BitField("pitch_eg_rate_1", 102),
    BitField("pitch_eg_rate_2", 103),
    BitField("pitch_eg_rate_3", 104),
    BitField("pitch_eg_rate_4", 105),
    BitField("pitch_eg_level_1", 106),
    BitField("pitch_eg_level_2", 107),
    BitField("pitch_eg_level_3", 108),
    BitField("pitch_eg_level_4", 109),
    BitField("algorithm", 110, 0, 5),
    BitField("feedback", 111, 0, 3),
    BitField("oscillator_key_sync", 111, 3, 1),
    BitField("lfo_rate", 112),
    BitField("lfo_delay", 113),
    BitField("lfo_pitch_modulation_depth", 114),
    BitField("lfo_amplitude_modulation_depth", 115),
    BitField("lfo_key_sync", 116, 0, 1),
    BitField("lfo_wave", 116, 1, 3),
    BitField("lfo_pitch_modulation_sensitivity", 116, 4, 4),
    BitField("transpose", 117),
]

NAME_OFFSET = 118


def _envelope(fields: Dict[str, int], prefix: str) -> tuple:
    return tuple(fields[f"{prefix}_{i}"] for i in range(1, 5))


def parse_operator(record: bytes, number: int) -> Operator:
    """
    Decode one 17-byte operator record.

    Args:
        record: Operator bytes
        number: Display number to assign (1-6)

    Returns:
        Decoded Operator
    """
    f = unpack_fields(record, OPERATOR_LAYOUT)

    return Operator(
        number=number,
        eg_rates=_envelope(f, "eg_rate"),
        eg_levels=_envelope(f, "eg_level"),
        level_scale_break_point=f["level_scale_break_point"],
        level_scale_left_depth=f["level_scale_left_depth"],
        level_scale_right_depth=f["level_scale_right_depth"],
        level_scale_left_curve=f["level_scale_left_curve"],
        level_scale_right_curve=f["level_scale_right_curve"],
        oscillator_rate_scale=f["oscillator_rate_scale"],
        detune=f["detune"],
        amplitude_modulation_sensitivity=f["amplitude_modulation_sensitivity"],
        key_velocity_sensitivity=f["key_velocity_sensitivity"],
        output_level=f["output_level"],
        oscillator_mode=f["oscillator_mode"],
        frequency_coarse=f["frequency_coarse"],
        frequency_fine=f["frequency_fine"],
    )


def parse_voice(record: bytes, number: int) -> Voice:
    """
    Decode one 128-byte voice record.

    Args:
        record: Voice bytes
        number: Voice number within the bank (1-32)

    Returns:
        Decoded Voice, operators in display order
    """
    if len(record) != VOICE_SIZE:
        raise ValueError(f"Voice record must be {VOICE_SIZE} bytes, got {len(record)}")

    # Operator 1 is stored last
    operators = []
    for i in range(OPERATOR_COUNT):
        slot = OPERATOR_COUNT - 1 - i
        start = slot * OPERATOR_SIZE
        operators.append(parse_operator(record[start : start + OPERATOR_SIZE], i + 1))

    f = unpack_fields(record, VOICE_LAYOUT)

    return Voice(
        number=number,
        operators=tuple(operators),
        pitch_eg_rates=_envelope(f, "pitch_eg_rate"),
        pitch_eg_levels=_envelope(f, "pitch_eg_level"),
        algorithm=f["algorithm"],
        feedback=f["feedback"],
        oscillator_key_sync=f["oscillator_key_sync"],
        lfo_rate=f["lfo_rate"],
        lfo_delay=f["lfo_delay"],
        lfo_pitch_modulation_depth=f["lfo_pitch_modulation_depth"],
        lfo_amplitude_modulation_depth=f["lfo_amplitude_modulation_depth"],
        lfo_key_sync=f["lfo_key_sync"],
        lfo_wave=f["lfo_wave"],
        lfo_pitch_modulation_sensitivity=f["lfo_pitch_modulation_sensitivity"],
        transpose=f["transpose"],
        name_raw=bytes(record[NAME_OFFSET : NAME_OFFSET + NAME_LENGTH]),
        raw=bytes(record),
    )


class BulkDumpParser:
    """
    Parser for DX7 32-voice bulk dump buffers.

    The buffer is validated before anything is decoded; a buffer that
    fails validation never yields voices.

    Example:
        parser = BulkDumpParser()
        dump = parser.parse_bytes(data)
        print(dump.voice(1).name)
    """

    DUMP_SIZE = DUMP_SIZE
    VOICE_COUNT = VOICE_COUNT
    VOICE_SIZE = VOICE_SIZE

    def parse_bytes(self, data: bytes) -> BulkDump:
        """
        Validate and decode a bulk dump.

        Args:
            data: Raw dump bytes (4104)

        Returns:
            Decoded BulkDump

        Raises:
            DumpValidationError: If the buffer fails validation
        """
        data = bytes(data)
        verify_bulk_dump(data)

        header = BulkDumpHeader(*data[:HEADER_SIZE])
        voices = tuple(
            parse_voice(self._voice_record(data, index), index + 1)
            for index in range(self.VOICE_COUNT)
        )

        logger.debug("Decoded %d voices", len(voices))

        return BulkDump(
            header=header,
            voices=voices,
            checksum=data[CHECKSUM_OFFSET],
            sysex_end=data[END_OFFSET],
            _raw_data=data,
        )

    def _voice_record(self, data: bytes, index: int) -> bytes:
        start = HEADER_SIZE + index * self.VOICE_SIZE
        return data[start : start + self.VOICE_SIZE]
