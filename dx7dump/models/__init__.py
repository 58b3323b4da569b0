"""Data models for DX7 bulk dump representation."""

from dx7dump.models.dump import BulkDump, BulkDumpHeader
from dx7dump.models.voice import Operator, Voice

__all__ = [
    "BulkDump",
    "BulkDumpHeader",
    "Operator",
    "Voice",
]
