"""
DX7Dump - Decoder for Yamaha DX7 32-voice bulk dump files.

This library provides tools to:
- Validate DX7 bulk dump SysEx files (.syx)
- Decode every voice and operator parameter, including packed bit-fields
- Map raw parameter codes to readable labels
- Find voices whose parameters are identical

Example usage:
    from dx7dump import DX7BulkReader, find_duplicates

    dump = DX7BulkReader.read("rom1a.syx")
    for voice in dump.voices:
        print(f"{voice.number:02d}: {voice.name}")

    for i, j in find_duplicates(dump):
        print(f"Voice {i} and voice {j} are identical")
"""

__version__ = "1.1.0"
__author__ = "DX7Dump Contributors"

from dx7dump.analysis.duplicates import find_duplicates
from dx7dump.formats.dx7.bulk_parser import BulkDumpParser
from dx7dump.formats.dx7.reader import DX7BulkReader, select_voices
from dx7dump.models.dump import BulkDump, BulkDumpHeader
from dx7dump.models.voice import Operator, Voice
from dx7dump.utils.validation import (
    ChecksumMismatchError,
    DumpValidationError,
    ErrorKind,
    MalformedHeaderError,
    SizeMismatchError,
    ValidationResult,
    validate_bulk_dump,
)

__all__ = [
    "find_duplicates",
    "BulkDumpParser",
    "DX7BulkReader",
    "select_voices",
    "BulkDump",
    "BulkDumpHeader",
    "Operator",
    "Voice",
    "ChecksumMismatchError",
    "DumpValidationError",
    "ErrorKind",
    "MalformedHeaderError",
    "SizeMismatchError",
    "ValidationResult",
    "validate_bulk_dump",
]
