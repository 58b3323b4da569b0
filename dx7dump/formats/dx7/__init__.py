"""DX7 32-voice bulk dump format support."""

from dx7dump.formats.dx7.bulk_parser import BulkDumpParser
from dx7dump.formats.dx7.reader import DX7BulkReader

__all__ = ["BulkDumpParser", "DX7BulkReader"]
