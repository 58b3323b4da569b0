"""
DX7 bulk dump checksum calculation utilities.

The 32-voice bulk dump carries a single checksum byte computed over the
4096 voice data bytes:
1. Sum the lower 7 bits of every data byte into an 8-bit accumulator
2. Take the two's complement of the sum
3. Keep the lower 7 bits

Header bytes (F0 43 0n 09 BH BL), the checksum itself and F7 are not
included.
"""

from typing import Union, List


def calculate_dx7_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate the checksum for DX7 bulk dump voice data.

    Args:
        data: Voice data bytes (the 4096-byte payload of a bulk dump)

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_dx7_checksum(bytes([0x01, 0x02, 0x03]))
        122
    """
    if isinstance(data, list):
        data = bytes(data)

    total = 0
    for byte in data:
        total = (total + (byte & 0x7F)) & 0xFF

    # Two's complement
    checksum = ((~total) + 1) & 0xFF

    return checksum & 0x7F
