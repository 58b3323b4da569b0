"""Utility functions for DX7Dump."""

from dx7dump.utils.checksum import calculate_dx7_checksum
from dx7dump.utils.validation import validate_bulk_dump, verify_bulk_dump

__all__ = [
    "calculate_dx7_checksum",
    "validate_bulk_dump",
    "verify_bulk_dump",
]
