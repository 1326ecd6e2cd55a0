"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from can_calibrations.calibration.signal import Signal
from can_calibrations.cli import main, parse_payload, parse_signal_spec
from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS
from can_calibrations.errors import ConfigurationError


class TestParsing:
    """Tests for the inline signal and payload parsers."""

    def test_minimal_signal_spec(self) -> None:
        """Test a spec with only name, start bit and length."""
        signal = parse_signal_spec("rpm:8:16")

        assert signal == Signal(name="rpm", start_bit=8, data_length=16)

    def test_full_signal_spec(self) -> None:
        """Test a spec with every field."""
        signal = parse_signal_spec("temp:0x10:12:big:signed:0.5:-40:C")

        assert signal.start_bit == 16
        assert signal.data_length == 12
        assert signal.endianness is Endianness.BIG
        assert signal.is_signed
        assert signal.gain == 0.5
        assert signal.offset == -40.0
        assert signal.unit == "C"

    @pytest.mark.parametrize("spec", ["rpm", "rpm:8", "rpm:8:16:little:maybe", "rpm:x:16"])
    def test_bad_signal_spec(self, spec: str) -> None:
        """Test malformed specs."""
        with pytest.raises(ValueError):
            parse_signal_spec(spec)

    def test_signal_spec_layout_checked(self) -> None:
        """Test that spec layouts go through signal validation."""
        with pytest.raises(ConfigurationError):
            parse_signal_spec("rpm:60:8")

    def test_parse_payload(self) -> None:
        """Test payload hex parsing."""
        assert parse_payload("0x0001 02") == bytes([0x00, 0x01, 0x02])
        assert parse_payload("") == b""

        with pytest.raises(ValueError, match="even length"):
            parse_payload("abc")


class TestCommands:
    """Tests for the click commands."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    def test_host(self, runner: CliRunner) -> None:
        """Test printing the host byte order."""
        result = runner.invoke(main, ["host"])

        assert result.exit_code == 0
        assert HOST_ENDIANNESS.value in result.output

    def test_decode(self, runner: CliRunner) -> None:
        """Test decoding a frame."""
        result = runner.invoke(
            main,
            ["decode", "0x001", "000102", "-s", "engine_speed:8:8:little:unsigned:1:0:RPM"],
        )

        assert result.exit_code == 0, result.output
        assert "engine_speed" in result.output
        assert "RPM" in result.output

    def test_decode_with_host_override(self, runner: CliRunner) -> None:
        """Test forcing the big-endian host branch."""
        result = runner.invoke(
            main,
            ["decode", "0x100", "0001020304050607", "-s", "all:0:64", "--host", "big"],
        )

        assert result.exit_code == 0, result.output
        assert str(0x0001020304050607) in result.output

    def test_decode_verbose_shows_definition(self, runner: CliRunner) -> None:
        """Test that verbose mode prints the registered signal layout."""
        result = runner.invoke(main, ["decode", "0x100", "0102", "-s", "rpm:0:16", "-v"])

        assert result.exit_code == 0, result.output
        assert "Definition 0x100" in result.output
        assert "Signal(rpm: u16@0 little" in result.output

    def test_decode_quiet_hides_definition(self, runner: CliRunner) -> None:
        """Test that the signal layout is only printed in verbose mode."""
        result = runner.invoke(main, ["decode", "0x100", "0102", "-s", "rpm:0:16"])

        assert result.exit_code == 0, result.output
        assert "Definition" not in result.output

    def test_decode_payload_too_short(self, runner: CliRunner) -> None:
        """Test that a failure value sets exit code 1."""
        result = runner.invoke(main, ["decode", "0x100", "01", "-s", "rpm:0:16"])

        assert result.exit_code == 1
        assert "NoDataToCalibrate" in result.output

    def test_decode_bad_signal(self, runner: CliRunner) -> None:
        """Test that an invalid signal spec is a usage error."""
        result = runner.invoke(main, ["decode", "0x100", "01", "-s", "rpm:60:8"])

        assert result.exit_code == 2
        assert "spans past 64 bits" in result.output

    def test_decode_bad_payload(self, runner: CliRunner) -> None:
        """Test that an invalid payload is a usage error."""
        result = runner.invoke(main, ["decode", "0x100", "0g", "-s", "rpm:0:8"])

        assert result.exit_code == 2
