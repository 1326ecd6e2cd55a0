"""Core value types shared by the calibration components."""

from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS, detect_host_endianness
from can_calibrations.core.frame import RawFrame
from can_calibrations.core.snapshot import SnapshotMap

__all__ = ["Endianness", "HOST_ENDIANNESS", "detect_host_endianness", "RawFrame", "SnapshotMap"]
