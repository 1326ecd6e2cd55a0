"""Signal calibration: descriptors, the decoding engine and the registry."""

from can_calibrations.calibration.engine import calibrate_signal
from can_calibrations.calibration.registry import (
    CalibrationListener,
    CalibrationRegistry,
    FrameDefinition,
)
from can_calibrations.calibration.results import (
    CalibratedDatum,
    CalibratedFrame,
    CalibrationFailure,
    CalibrationResult,
    FrameIDNotFound,
    NoDataToCalibrate,
)
from can_calibrations.calibration.signal import Signal

__all__ = [
    "calibrate_signal",
    "CalibrationListener",
    "CalibrationRegistry",
    "FrameDefinition",
    "CalibratedDatum",
    "CalibratedFrame",
    "CalibrationFailure",
    "CalibrationResult",
    "FrameIDNotFound",
    "NoDataToCalibrate",
    "Signal",
]
