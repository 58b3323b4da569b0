"""Test configuration and fixtures.

Banks are assembled byte by byte here so tests do not depend on any
particular .syx file being present.
"""

import pytest
from pathlib import Path
from typing import List, Optional

HEADER = bytes([0xF0, 0x43, 0x00, 0x09, 0x20, 0x00])


def make_operator(slot: int) -> bytearray:
    """
    Build a 17-byte operator record whose values depend on its storage slot.

    Slot 0 is Operator 6, slot 5 is Operator 1.
    """
    return bytearray(
        [
            10 + slot,  # EG rate 1
            20 + slot,  # EG rate 2
            30 + slot,  # EG rate 3
            40 + slot,  # EG rate 4
            99,  # EG level 1
            90 - slot,  # EG level 2
            80,  # EG level 3
            0,  # EG level 4
            39,  # Break point (C3)
            10,  # Left depth
            20,  # Right depth
            (2 << 2) | 1,  # Right curve +EXP, left curve -EXP
            (7 << 3) | 3,  # Detune 7, rate scale 3
            (5 << 2) | 2,  # Key velocity sens 5, AMS 2
            90 + slot,  # Output level
            (1 << 1) | 0,  # Coarse 1, ratio mode
            0,  # Fine
        ]
    )


def make_voice(name: bytes = b"INIT VOICE", algorithm: int = 21, transpose: int = 24) -> bytearray:
    """Build a 128-byte voice record."""
    record = bytearray()
    for slot in range(6):
        record += make_operator(slot)

    record += bytes([50, 51, 52, 53])  # Pitch EG rates
    record += bytes([60, 61, 62, 63])  # Pitch EG levels
    record.append(algorithm)
    record.append((1 << 3) | 6)  # Osc key sync on, feedback 6
    record += bytes([35, 1, 5, 7])  # LFO rate, delay, PMD, AMD
    record.append((3 << 4) | (4 << 1) | 1)  # PMS 3, wave Sine, LFO key sync on
    record.append(transpose)
    record += name.ljust(10, b" ")[:10]

    assert len(record) == 128
    return record


def checksum(payload: bytes) -> int:
    return (-sum(b & 0x7F for b in payload)) & 0x7F


def make_dump(voices: Optional[List[bytes]] = None) -> bytearray:
    """Build a complete 4104-byte bulk dump with a correct checksum."""
    if voices is None:
        voices = [
            make_voice(name=f"VOICE {i + 1:02d}".encode("ascii"), algorithm=i) for i in range(32)
        ]

    payload = b"".join(bytes(v) for v in voices)
    assert len(payload) == 4096

    return bytearray(HEADER + payload + bytes([checksum(payload), 0xF7]))


def resign(data: bytearray) -> bytearray:
    """Recompute the checksum byte after editing the voice data."""
    data[4102] = checksum(bytes(data[6:4102]))
    return data


@pytest.fixture
def voice_factory():
    """Return the voice record builder."""
    return make_voice


@pytest.fixture
def dump_factory():
    """Return the bulk dump builder."""
    return make_dump


@pytest.fixture
def dump_data():
    """Return raw bytes of a valid bank of 32 distinct voices."""
    return bytes(make_dump())


@pytest.fixture
def dump_file(tmp_path, dump_data):
    """Return path to a valid bulk dump file."""
    path = tmp_path / "bank.syx"
    path.write_bytes(dump_data)
    return path
