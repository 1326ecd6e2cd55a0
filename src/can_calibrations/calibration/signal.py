"""Signal descriptors: where a value lives in a payload and how to scale it."""

from dataclasses import dataclass

from can_calibrations.core.endianness import Endianness
from can_calibrations.errors import ConfigurationError


MAX_SIGNAL_BITS = 64


@dataclass(frozen=True)
class Signal:
    """Definition of a single bit field within a CAN payload.

    The start_bit counts from the least significant bit of payload byte 0.
    The decoded raw integer is turned into an engineering value with
    ``raw * gain + offset``.

    The layout is checked on construction: a field that would reach past
    bit 64 raises ConfigurationError here rather than failing at decode
    time.
    """

    name: str
    start_bit: int
    data_length: int
    endianness: Endianness = Endianness.LITTLE
    is_signed: bool = False
    gain: float = 1.0
    offset: float = 0.0
    unit: str = ""

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "endianness", Endianness.coerce(self.endianness))
        except ValueError as exc:
            raise ConfigurationError(f"Signal {self.name!r}: {exc}") from None

        if self.data_length > MAX_SIGNAL_BITS:
            raise ConfigurationError(
                f"Signal {self.name!r}: data fields larger than {MAX_SIGNAL_BITS} bits "
                f"are not supported, got {self.data_length}"
            )
        if self.data_length < 1:
            raise ConfigurationError(
                f"Signal {self.name!r}: data length must be at least 1 bit, got {self.data_length}"
            )
        if self.start_bit < 0:
            raise ConfigurationError(
                f"Signal {self.name!r}: start bit must be non-negative, got {self.start_bit}"
            )
        if self.start_bit + self.data_length > MAX_SIGNAL_BITS:
            raise ConfigurationError(
                f"Signal {self.name!r}: start bit + data length spans past "
                f"{MAX_SIGNAL_BITS} bits ({self.start_bit} + {self.data_length})"
            )

    @property
    def end_bit(self) -> int:
        """One past the most significant bit of the field."""
        return self.start_bit + self.data_length

    def fits(self, payload_length: int) -> bool:
        """Return True if a payload of ``payload_length`` bytes holds the field."""
        return self.end_bit <= payload_length * 8

    def __repr__(self) -> str:
        sign = "s" if self.is_signed else "u"
        return (
            f"Signal({self.name}: {sign}{self.data_length}@{self.start_bit} "
            f"{self.endianness.value}, x{self.gain:g}{self.offset:+g}{self.unit})"
        )
