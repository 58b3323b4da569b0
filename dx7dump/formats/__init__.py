"""File format readers for DX7 SysEx data."""
