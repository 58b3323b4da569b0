"""Analysis tools for decoded DX7 banks."""

from dx7dump.analysis.duplicates import find_duplicates

__all__ = ["find_duplicates"]
