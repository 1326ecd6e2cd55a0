"""Frame definitions and the registry that dispatches frames to them."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence

from can_calibrations.calibration.engine import calibrate_signal
from can_calibrations.calibration.results import (
    CalibratedDatum,
    CalibratedFrame,
    CalibrationResult,
    FrameIDNotFound,
    NoDataToCalibrate,
)
from can_calibrations.calibration.signal import Signal
from can_calibrations.config import CalibrationConfig
from can_calibrations.core.frame import RawFrame
from can_calibrations.core.snapshot import SnapshotMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameDefinition:
    """The signals carried by frames with one arbitration ID."""

    frame_id: int
    signals: Sequence[Signal] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "signals", tuple(self.signals))

    def get_signal(self, name: str) -> Optional[Signal]:
        """Get a signal by name."""
        for signal in self.signals:
            if signal.name == name:
                return signal
        return None


class CalibrationListener(Protocol):
    """Receives every frame the registry calibrates successfully.

    Called synchronously on the thread that called
    CalibrationRegistry.calibrate. Implementations that need to do slow
    work should hand the result off (see QueueListener).
    """

    def process_calibrated_data(
        self,
        registry: CalibrationRegistry,
        calibrated: CalibratedFrame,
    ) -> None:
        ...


class CalibrationRegistry:
    """Turns raw CAN frames into calibrated engineering values.

    Holds one FrameDefinition per frame ID. Definitions can be added,
    replaced and removed from any thread while other threads calibrate
    frames; each calibrate call works against a single consistent
    snapshot of the definitions.
    """

    def __init__(
        self,
        definitions: Iterable[FrameDefinition] = (),
        listener: Optional[CalibrationListener] = None,
        config: Optional[CalibrationConfig] = None,
    ) -> None:
        self._config = config or CalibrationConfig()
        self._definitions: SnapshotMap[int, FrameDefinition] = SnapshotMap(
            {definition.frame_id: definition for definition in definitions}
        )
        self._listener = listener
        self._unknown_ids: set[int] = set()
        self._unknown_lock = threading.Lock()

    @property
    def config(self) -> CalibrationConfig:
        return self._config

    @property
    def listener(self) -> Optional[CalibrationListener]:
        return self._listener

    @property
    def frame_ids(self) -> set[int]:
        """Set of frame IDs with registered definitions."""
        return set(self._definitions.snapshot().keys())

    @property
    def unknown_ids(self) -> set[int]:
        """Set of frame IDs seen without a definition."""
        with self._unknown_lock:
            return self._unknown_ids.copy()

    def add_frame(self, frame_id: int, signals: Iterable[Signal]) -> None:
        """Register the signals for ``frame_id``, replacing any existing definition."""
        definition = FrameDefinition(frame_id=frame_id, signals=tuple(signals))
        replaced = self._definitions.insert(frame_id, definition)
        if replaced is not None:
            logger.info(
                "Replaced calibration for frame %#x (%d -> %d signals)",
                frame_id,
                len(replaced.signals),
                len(definition.signals),
            )
        else:
            logger.info("Added calibration for frame %#x (%d signals)", frame_id, len(definition.signals))

    def remove_frame(self, frame_id: int) -> None:
        """Remove the definition for ``frame_id``. Unknown IDs are ignored."""
        if self._definitions.remove(frame_id) is not None:
            logger.info("Removed calibration for frame %#x", frame_id)

    def get_frame(self, frame_id: int) -> Optional[FrameDefinition]:
        """Get the definition for a frame ID."""
        return self._definitions.get(frame_id)

    def calibrate(self, frame: RawFrame) -> CalibrationResult:
        """Calibrate every signal defined for the frame's ID.

        Returns a CalibratedFrame, or FrameIDNotFound when no definition is
        registered, or NoDataToCalibrate when none of the defined signals
        fit the frame's payload. Signals that do not fit are left out of an
        otherwise successful result.
        """
        definition = self._definitions.get(frame.frame_id)
        if definition is None:
            self._note_unknown(frame.frame_id)
            return FrameIDNotFound(frame_id=frame.frame_id)

        host = self._config.host_endianness
        signals: dict[str, CalibratedDatum] = {}
        for signal in definition.signals:
            datum = calibrate_signal(signal, frame, host)
            if datum is None:
                logger.debug(
                    "Skipping signal %r of frame %#x: needs %d bits, payload has %d",
                    signal.name,
                    frame.frame_id,
                    signal.end_bit,
                    len(frame.data) * 8,
                )
                continue
            signals[datum.name] = datum

        if not signals:
            logger.debug("Nothing to calibrate in frame %r", frame)
            return NoDataToCalibrate(frame_id=frame.frame_id, payload_length=len(frame.data))

        calibrated = CalibratedFrame(timestamp=frame.timestamp, frame_id=frame.frame_id, signals=signals)
        if self._listener is not None:
            self._listener.process_calibrated_data(self, calibrated)
        return calibrated

    def on_frame(self, frame: RawFrame) -> None:
        """Subscriber entry point for a transport that pushes frames."""
        self.calibrate(frame)

    def calibrate_batch(self, frames: Iterable[RawFrame]) -> list[CalibratedFrame]:
        """Calibrate multiple frames, keeping only the successful results."""
        results = []
        for frame in frames:
            result = self.calibrate(frame)
            if result.ok:
                results.append(result)
        return results

    def clear_unknown(self) -> None:
        """Clear the set of unknown IDs."""
        with self._unknown_lock:
            self._unknown_ids.clear()

    def _note_unknown(self, frame_id: int) -> None:
        if not self._config.track_unknown_ids:
            return
        with self._unknown_lock:
            if frame_id in self._unknown_ids:
                return
            self._unknown_ids.add(frame_id)
        logger.debug("No calibration registered for frame %#x", frame_id)

    def __contains__(self, frame_id: object) -> bool:
        return frame_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
