"""can-calibrations - decode raw CAN frames into calibrated engineering values."""

__version__ = "0.1.0"

from can_calibrations.errors import CalibrationError, ConfigurationError
from can_calibrations.config import CalibrationConfig
from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS
from can_calibrations.core.frame import RawFrame
from can_calibrations.calibration.signal import Signal
from can_calibrations.calibration.results import (
    CalibratedDatum,
    CalibratedFrame,
    CalibrationFailure,
    FrameIDNotFound,
    NoDataToCalibrate,
)
from can_calibrations.calibration.engine import calibrate_signal
from can_calibrations.calibration.registry import (
    CalibrationListener,
    CalibrationRegistry,
    FrameDefinition,
)
from can_calibrations.listeners import CollectingListener, QueueListener

__all__ = [
    "CalibrationError",
    "ConfigurationError",
    "CalibrationConfig",
    "Endianness",
    "HOST_ENDIANNESS",
    "RawFrame",
    "Signal",
    "CalibratedDatum",
    "CalibratedFrame",
    "CalibrationFailure",
    "FrameIDNotFound",
    "NoDataToCalibrate",
    "calibrate_signal",
    "CalibrationListener",
    "CalibrationRegistry",
    "FrameDefinition",
    "CollectingListener",
    "QueueListener",
]
