"""Tests for signal descriptors and byte order handling."""

import pytest
from can_calibrations.calibration.signal import Signal
from can_calibrations.config import CalibrationConfig
from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS, detect_host_endianness
from can_calibrations.errors import CalibrationError, ConfigurationError


class TestEndianness:
    """Tests for the Endianness enum."""

    def test_coerce_strings(self) -> None:
        """Test converting byte order names."""
        assert Endianness.coerce("big") is Endianness.BIG
        assert Endianness.coerce(" Little ") is Endianness.LITTLE
        assert Endianness.coerce(Endianness.BIG) is Endianness.BIG

    def test_coerce_unknown(self) -> None:
        """Test rejecting unknown byte order names."""
        with pytest.raises(ValueError, match="Unknown byte order"):
            Endianness.coerce("middle")

    def test_host_detected_once(self) -> None:
        """Test that the cached host order matches detection."""
        assert HOST_ENDIANNESS is detect_host_endianness()


class TestSignal:
    """Tests for Signal class."""

    def test_create_signal(self) -> None:
        """Test creating a signal with defaults."""
        signal = Signal(name="RPM", start_bit=0, data_length=16)

        assert signal.endianness is Endianness.LITTLE
        assert signal.is_signed is False
        assert signal.gain == 1.0
        assert signal.offset == 0.0
        assert signal.unit == ""
        assert signal.end_bit == 16

    def test_endianness_from_string(self) -> None:
        """Test that string byte orders are coerced."""
        signal = Signal(name="RPM", start_bit=0, data_length=16, endianness="big")

        assert signal.endianness is Endianness.BIG

    def test_unknown_endianness(self) -> None:
        """Test that an unknown byte order is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown byte order"):
            Signal(name="RPM", start_bit=0, data_length=16, endianness="middle")

    @pytest.mark.parametrize("start_bit,data_length", [(0, 64), (63, 1), (56, 8), (32, 32)])
    def test_layout_within_64_bits(self, start_bit: int, data_length: int) -> None:
        """Test layouts that end on or before bit 64."""
        Signal(name="S", start_bit=start_bit, data_length=data_length)

    def test_data_length_too_long(self) -> None:
        """Test fields wider than 64 bits."""
        with pytest.raises(ConfigurationError, match="larger than 64 bits"):
            Signal(name="S", start_bit=0, data_length=65)

    @pytest.mark.parametrize("start_bit,data_length", [(60, 8), (1, 64), (64, 1)])
    def test_layout_spans_past_64_bits(self, start_bit: int, data_length: int) -> None:
        """Test fields that run past bit 64."""
        with pytest.raises(ConfigurationError, match="spans past 64 bits"):
            Signal(name="S", start_bit=start_bit, data_length=data_length)

    def test_empty_field(self) -> None:
        """Test zero-length fields."""
        with pytest.raises(ConfigurationError, match="at least 1 bit"):
            Signal(name="S", start_bit=0, data_length=0)

    def test_negative_start_bit(self) -> None:
        """Test negative start bits."""
        with pytest.raises(ConfigurationError, match="non-negative"):
            Signal(name="S", start_bit=-1, data_length=8)

    def test_configuration_error_hierarchy(self) -> None:
        """Test that configuration errors are also ValueErrors."""
        assert issubclass(ConfigurationError, CalibrationError)
        assert issubclass(ConfigurationError, ValueError)

    def test_any_gain_and_offset_allowed(self) -> None:
        """Test that scaling is not validated."""
        signal = Signal(name="S", start_bit=0, data_length=8, gain=0.0, offset=-1e9)

        assert signal.gain == 0.0
        assert signal.offset == -1e9

    def test_fits(self) -> None:
        """Test payload length checks."""
        signal = Signal(name="S", start_bit=8, data_length=16)

        assert signal.fits(3)
        assert signal.fits(8)
        assert not signal.fits(2)
        assert not signal.fits(0)

    def test_signal_immutable(self) -> None:
        """Test that signal is immutable (frozen dataclass)."""
        signal = Signal(name="S", start_bit=0, data_length=8)

        with pytest.raises(AttributeError):
            signal.gain = 2.0  # type: ignore

    def test_signal_repr(self) -> None:
        """Test signal string representation."""
        signal = Signal(name="Temp", start_bit=16, data_length=8, is_signed=True, offset=-40, unit="C")

        assert repr(signal) == "Signal(Temp: s8@16 little, x1-40C)"


class TestCalibrationConfig:
    """Tests for CalibrationConfig."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = CalibrationConfig()

        assert config.host_endianness is HOST_ENDIANNESS
        assert config.track_unknown_ids is True

    def test_host_from_string(self) -> None:
        """Test overriding the host byte order by name."""
        config = CalibrationConfig(host_endianness="big")

        assert config.host_endianness is Endianness.BIG
