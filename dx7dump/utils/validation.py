"""
Structural validation for DX7 32-voice bulk dumps.

Bulk Dump Format (4104 bytes):
    F0 43 0n 09 20 00 [32 x 128 voice bytes] CS F7

Where:
    - 0n: Sub-status 0, channel n+1 (only channel 1 is accepted)
    - 09: Format 9, 32 voices
    - 20 00: Byte count MSB/LSB (4096)
    - CS: Checksum over the 4096 voice bytes
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dx7dump.utils.checksum import calculate_dx7_checksum

logger = logging.getLogger(__name__)


SYSEX_START = 0xF0
SYSEX_END = 0xF7
YAMAHA_ID = 0x43
SUB_STATUS_CHANNEL_1 = 0x00
FORMAT_32_VOICES = 0x09
SIZE_MSB = 0x20
SIZE_LSB = 0x00

HEADER_SIZE = 6
VOICE_COUNT = 32
VOICE_SIZE = 128
PAYLOAD_SIZE = VOICE_COUNT * VOICE_SIZE
DUMP_SIZE = HEADER_SIZE + PAYLOAD_SIZE + 2

CHECKSUM_OFFSET = DUMP_SIZE - 2
END_OFFSET = DUMP_SIZE - 1


class ErrorKind(Enum):
    """Machine-distinguishable kinds of structural failure."""

    SIZE_MISMATCH = "size_mismatch"
    MALFORMED_HEADER = "malformed_header"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class HeaderCheck(Enum):
    """
    Framing checks performed on a bulk dump, in the order they run.

    Each value is (offset, description) so callers can report which
    marker failed.
    """

    SYSEX_START = (0, "sysex start 0xF0")
    YAMAHA_ID = (1, "Yamaha 0x43")
    SUB_STATUS = (2, "substatus 0 and channel 1")
    FORMAT = (3, "format 9 (32 voices)")
    BYTE_COUNT = (4, "size 4096")
    SYSEX_END = (END_OFFSET, "sysex end 0xF7")

    @property
    def offset(self) -> int:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


class DumpValidationError(Exception):
    """Raised when a buffer is not a well-formed DX7 bulk dump."""

    kind: ErrorKind


class SizeMismatchError(DumpValidationError):
    """Input length is not exactly 4104 bytes."""

    kind = ErrorKind.SIZE_MISMATCH

    def __init__(self, actual_size: int):
        self.actual_size = actual_size
        super().__init__(f"Expected {DUMP_SIZE} bytes, got {actual_size}")


class MalformedHeaderError(DumpValidationError):
    """A framing marker, format id or byte count does not match."""

    kind = ErrorKind.MALFORMED_HEADER

    def __init__(self, check: HeaderCheck):
        self.check = check
        super().__init__(f"Did not find {check.description}")


class ChecksumMismatchError(DumpValidationError):
    """Stored checksum does not match the one computed over the voice data."""

    kind = ErrorKind.CHECKSUM_MISMATCH

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum failed: should have been 0x{expected:02X}, found 0x{actual:02X}")


@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict of validating a bulk dump buffer.

    Attributes:
        valid: True if the buffer passed every check
        error: The first failure found, or None
    """

    valid: bool
    error: Optional[DumpValidationError] = None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @property
    def reason(self) -> str:
        return str(self.error) if self.error else ""

    @property
    def expected_checksum(self) -> Optional[int]:
        """Expected checksum value, only set for checksum failures."""
        if isinstance(self.error, ChecksumMismatchError):
            return self.error.expected
        return None


def _check_header(data: bytes) -> None:
    expected = {
        HeaderCheck.SYSEX_START: data[0] == SYSEX_START,
        HeaderCheck.YAMAHA_ID: data[1] == YAMAHA_ID,
        HeaderCheck.SUB_STATUS: data[2] == SUB_STATUS_CHANNEL_1,
        HeaderCheck.FORMAT: data[3] == FORMAT_32_VOICES,
        HeaderCheck.BYTE_COUNT: data[4] == SIZE_MSB and data[5] == SIZE_LSB,
        HeaderCheck.SYSEX_END: data[END_OFFSET] == SYSEX_END,
    }

    # Enum iteration order is the check order
    for check in HeaderCheck:
        if not expected[check]:
            raise MalformedHeaderError(check)


def verify_bulk_dump(data: bytes) -> None:
    """
    Verify that a buffer is a complete DX7 32-voice bulk dump.

    Checks run in order and stop at the first failure: size, the six
    framing checks, then the checksum.

    Args:
        data: Raw file contents

    Raises:
        SizeMismatchError: If the buffer is not 4104 bytes
        MalformedHeaderError: If a marker, format id or byte count is wrong
        ChecksumMismatchError: If the stored checksum is wrong
    """
    if len(data) != DUMP_SIZE:
        logger.debug("Rejecting buffer of %d bytes", len(data))
        raise SizeMismatchError(len(data))

    _check_header(data)

    payload = data[HEADER_SIZE:CHECKSUM_OFFSET]
    expected = calculate_dx7_checksum(payload)
    stored = data[CHECKSUM_OFFSET]

    if expected != stored:
        logger.debug("Checksum mismatch: computed 0x%02X, stored 0x%02X", expected, stored)
        raise ChecksumMismatchError(expected, stored)


def validate_bulk_dump(data: bytes) -> ValidationResult:
    """
    Validate a buffer and return a verdict instead of raising.

    Args:
        data: Raw file contents

    Returns:
        ValidationResult with the first failure, if any
    """
    try:
        verify_bulk_dump(data)
    except DumpValidationError as e:
        logger.info("Invalid bulk dump: %s", e)
        return ValidationResult(valid=False, error=e)

    return ValidationResult(valid=True)
