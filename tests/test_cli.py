"""Tests for the dx7dump command line interface."""

import sys
from pathlib import Path

from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from conftest import make_dump, make_voice
from cli.app import app
from cli.commands.listing import ListingOptions

runner = CliRunner()


def write_bank(tmp_path, voices=None, name="bank.syx"):
    path = tmp_path / name
    path.write_bytes(bytes(make_dump(voices)))
    return path


class TestListCommand:
    """Plain text listings."""

    def test_short_listing(self, dump_file):
        result = runner.invoke(app, ["list", str(dump_file)])

        assert result.exit_code == 0
        assert "01: VOICE 01" in result.output
        assert "32: VOICE 32" in result.output
        assert "Operator" not in result.output

    def test_long_listing_single_patch(self, dump_file):
        result = runner.invoke(app, ["list", str(dump_file), "-p", "2"])

        assert result.exit_code == 0
        assert "Voice: 02" in result.output
        assert "Name: VOICE 02" in result.output
        assert "Voice: 01" not in result.output
        assert "Algorithm: 02" in result.output
        assert "Feedback: 06" in result.output
        assert "Oscillator Key Sync: 01 (On)" in result.output
        assert "  Wave: 04 (Sine)" in result.output
        assert "Transpose: 24 (C3)" in result.output
        assert "Operator 01: " in result.output
        assert "Operator 06: " in result.output
        assert "    Break Point: 39 (C3)" in result.output
        assert "    Left Curve: 01 (-EXP)" in result.output
        assert "    Right Curve: 02 (+EXP)" in result.output
        assert "  Oscillator Mode: 00 (Ratio)" in result.output
        assert "  Frequency Course: 01" in result.output

    def test_long_listing_all(self, dump_file):
        result = runner.invoke(app, ["list", str(dump_file), "--long"])

        assert result.exit_code == 0
        assert result.output.count("Operator 01: ") == 32

    def test_fixed_frequency_listing(self, tmp_path):
        voice = make_voice()
        voice[5 * 17 + 15] = (5 << 1) | 1
        voice[5 * 17 + 16] = 50
        path = write_bank(tmp_path, [voice] + [make_voice(algorithm=i) for i in range(1, 32)])

        result = runner.invoke(app, ["list", str(path), "-p", "1"])

        assert result.exit_code == 0
        assert "  Oscillator Mode: 01 (Fixed)" in result.output
        assert "  Frequency Course: 31.6228 Hz" in result.output
        assert "  Frequency Fine: 50" in result.output

    def test_find_duplicates(self, tmp_path):
        voices = [make_voice(algorithm=i) for i in range(32)]
        voices[17] = make_voice(name=b"COPY", algorithm=3)
        path = write_bank(tmp_path, voices)

        result = runner.invoke(app, ["list", str(path), "-f"])

        assert result.exit_code == 0
        assert "Found duplicates: Voice 4 and voice 18." in result.output

    def test_patch_out_of_range(self, dump_file):
        result = runner.invoke(app, ["list", str(dump_file), "-p", "33"])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["list", str(tmp_path / "missing.syx")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_directory(self, tmp_path):
        result = runner.invoke(app, ["list", str(tmp_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Can't open" in result.output

    def test_wrong_size(self, tmp_path):
        path = tmp_path / "small.syx"
        path.write_bytes(bytes(100))

        result = runner.invoke(app, ["list", str(path)])

        assert result.exit_code == 1
        assert "does not match the expected size of a sysex file" in result.output

    def test_bad_checksum(self, tmp_path, dump_data):
        data = bytearray(dump_data)
        data[4102] ^= 0x01
        path = tmp_path / "bad.syx"
        path.write_bytes(bytes(data))

        result = runner.invoke(app, ["list", str(path)])

        assert result.exit_code == 1
        assert "Checksum failed" in result.output
        assert "is not a valid sysex file" in result.output


class TestListingOptions:
    """Display directives."""

    def test_defaults(self):
        options = ListingOptions()
        assert not options.long
        assert options.patch is None
        assert not options.find_duplicates

    def test_patch_implies_long(self):
        assert ListingOptions(patch=3).long


class TestOtherCommands:
    """Rich views, validation and version."""

    def test_validate_valid(self, dump_file):
        result = runner.invoke(app, ["validate", str(dump_file)])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_validate_bad_checksum(self, tmp_path, dump_data):
        data = bytearray(dump_data)
        data[4102] ^= 0x01
        path = tmp_path / "bad.syx"
        path.write_bytes(bytes(data))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_validate_wrong_size(self, tmp_path):
        path = tmp_path / "small.syx"
        path.write_bytes(bytes(10))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.syx")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_validate_directory(self, tmp_path):
        """A path that cannot be opened as a file exits cleanly with status 1."""
        result = runner.invoke(app, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Can't open" in result.output

    def test_show_bank(self, dump_file):
        result = runner.invoke(app, ["show", str(dump_file)])
        assert result.exit_code == 0

    def test_show_voice(self, dump_file):
        result = runner.invoke(app, ["show", str(dump_file), "3", "--hex"])
        assert result.exit_code == 0

    def test_show_voice_out_of_range(self, dump_file):
        result = runner.invoke(app, ["show", str(dump_file), "40"])
        assert result.exit_code == 1

    def test_duplicates_none(self, dump_file):
        result = runner.invoke(app, ["duplicates", str(dump_file)])

        assert result.exit_code == 0
        assert "No duplicate voices found" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "dx7dump" in result.output
