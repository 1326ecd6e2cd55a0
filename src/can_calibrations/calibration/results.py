"""Values produced by calibrating frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class CalibratedDatum:
    """A decoded signal with its engineering value and the raw field it came from."""

    timestamp: float
    name: str
    unit: str
    value: float
    raw_value: int

    def __repr__(self) -> str:
        return f"{self.name}={self.value:.3f}{self.unit}"


@dataclass(frozen=True)
class CalibratedFrame:
    """All signals calibrated out of one frame, keyed by signal name."""

    timestamp: float
    frame_id: int
    signals: Mapping[str, CalibratedDatum] = field(default_factory=dict)

    ok = True

    def get(self, name: str) -> Optional[CalibratedDatum]:
        """Get a signal by name."""
        return self.signals.get(name)

    def values(self) -> dict[str, float]:
        """Map of signal name to engineering value."""
        return {name: datum.value for name, datum in self.signals.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.signals

    def __len__(self) -> int:
        return len(self.signals)

    def __repr__(self) -> str:
        sig_str = ", ".join(repr(s) for s in self.signals.values())
        return f"[{self.frame_id:#x}]@{self.timestamp:.6f}: {sig_str}"


@dataclass(frozen=True)
class CalibrationFailure:
    """Base class for frames that produced no calibrated data."""

    frame_id: int
    message: str = ""

    ok = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.frame_id:#x}]: {self.message}"


@dataclass(frozen=True)
class FrameIDNotFound(CalibrationFailure):
    """No frame definition is registered for the frame's ID."""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(
                self, "message", f"No calibration registered for frame ID {self.frame_id:#x}"
            )


@dataclass(frozen=True)
class NoDataToCalibrate(CalibrationFailure):
    """A definition exists but none of its signals fit the frame's payload."""

    payload_length: int = 0

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(
                self,
                "message",
                f"No signal of frame ID {self.frame_id:#x} fits a {self.payload_length}-byte payload",
            )


CalibrationResult = Union[CalibratedFrame, CalibrationFailure]
