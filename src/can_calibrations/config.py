"""Runtime configuration for the calibration registry."""

from dataclasses import dataclass, field

from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS


@dataclass(frozen=True)
class CalibrationConfig:
    """Configuration for a CalibrationRegistry.

    host_endianness decides when a field needs byte swapping. It defaults to
    the byte order of the running platform; override it only to exercise
    the other branch in tests.
    """

    host_endianness: Endianness = field(default=HOST_ENDIANNESS)
    track_unknown_ids: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "host_endianness", Endianness.coerce(self.host_endianness))
