"""Tests for bulk dump structural validation."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dx7dump.utils.validation import (
    ChecksumMismatchError,
    DumpValidationError,
    ErrorKind,
    HeaderCheck,
    MalformedHeaderError,
    SizeMismatchError,
    validate_bulk_dump,
    verify_bulk_dump,
)


class TestSizeCheck:
    """Buffers of the wrong length are rejected before anything else."""

    @pytest.mark.parametrize("size", [0, 6, 4103, 4105, 4104 * 2])
    def test_wrong_size(self, size):
        """Any length other than 4104 is a size mismatch."""
        with pytest.raises(SizeMismatchError) as exc_info:
            verify_bulk_dump(bytes(size))

        assert exc_info.value.kind == ErrorKind.SIZE_MISMATCH
        assert exc_info.value.actual_size == size

    def test_truncated_valid_dump(self, dump_data):
        """A valid dump missing its end marker is a size mismatch."""
        result = validate_bulk_dump(dump_data[:-1])

        assert not result.valid
        assert result.kind == ErrorKind.SIZE_MISMATCH


class TestHeaderChecks:
    """Framing byte checks."""

    def test_valid_dump(self, dump_data):
        """A well-formed dump passes every check."""
        verify_bulk_dump(dump_data)

        result = validate_bulk_dump(dump_data)
        assert result.valid
        assert result.error is None
        assert result.kind is None
        assert result.reason == ""

    @pytest.mark.parametrize(
        "offset, check",
        [
            (0, HeaderCheck.SYSEX_START),
            (1, HeaderCheck.YAMAHA_ID),
            (2, HeaderCheck.SUB_STATUS),
            (3, HeaderCheck.FORMAT),
            (4, HeaderCheck.BYTE_COUNT),
            (5, HeaderCheck.BYTE_COUNT),
            (4103, HeaderCheck.SYSEX_END),
        ],
    )
    def test_mutated_marker(self, dump_data, offset, check):
        """Changing any framing byte reports which check failed."""
        data = bytearray(dump_data)
        data[offset] ^= 0x01

        with pytest.raises(MalformedHeaderError) as exc_info:
            verify_bulk_dump(bytes(data))

        assert exc_info.value.check == check
        assert exc_info.value.kind == ErrorKind.MALFORMED_HEADER

    def test_other_channel_rejected(self, dump_data):
        """Only sub-status 0, channel 1 is accepted."""
        data = bytearray(dump_data)
        data[2] = 0x03

        result = validate_bulk_dump(bytes(data))

        assert not result.valid
        assert result.kind == ErrorKind.MALFORMED_HEADER
        assert "substatus" in result.reason

    def test_checks_run_in_order(self, dump_data):
        """The first failing check is the one reported."""
        data = bytearray(dump_data)
        data[3] = 0x00
        data[4103] = 0x00

        with pytest.raises(MalformedHeaderError) as exc_info:
            verify_bulk_dump(bytes(data))

        assert exc_info.value.check == HeaderCheck.FORMAT

    def test_header_before_checksum(self, dump_data):
        """A bad marker wins over a bad checksum."""
        data = bytearray(dump_data)
        data[1] = 0x41
        data[100] ^= 0x01

        result = validate_bulk_dump(bytes(data))

        assert result.kind == ErrorKind.MALFORMED_HEADER


class TestChecksumCheck:
    """Checksum over the voice data."""

    @pytest.mark.parametrize("offset", [6, 100, 2000, 4101])
    @pytest.mark.parametrize("bit", range(7))
    def test_flipped_payload_bit(self, dump_data, offset, bit):
        """Flipping a data bit without fixing the checksum is detected."""
        data = bytearray(dump_data)
        data[offset] ^= 1 << bit

        with pytest.raises(ChecksumMismatchError) as exc_info:
            verify_bulk_dump(bytes(data))

        assert exc_info.value.kind == ErrorKind.CHECKSUM_MISMATCH
        assert exc_info.value.actual == dump_data[4102]

    def test_expected_value_reported(self, dump_data):
        """The verdict carries the checksum the data should have had."""
        data = bytearray(dump_data)
        correct = data[4102]
        data[4102] = (correct + 1) & 0x7F

        result = validate_bulk_dump(bytes(data))

        assert not result.valid
        assert result.kind == ErrorKind.CHECKSUM_MISMATCH
        assert result.expected_checksum == correct

    def test_expected_checksum_only_for_checksum_errors(self, dump_data):
        """Other failures do not report an expected checksum."""
        result = validate_bulk_dump(dump_data[:100])

        assert result.expected_checksum is None

    def test_errors_share_base_class(self, dump_data):
        """Every structural failure is a DumpValidationError."""
        data = bytearray(dump_data)
        data[4102] ^= 0x01

        with pytest.raises(DumpValidationError):
            verify_bulk_dump(bytes(data))
