"""Ready-made CalibrationListener implementations."""

from __future__ import annotations

import queue
import threading
from typing import TYPE_CHECKING, Optional

from can_calibrations.calibration.results import CalibratedFrame

if TYPE_CHECKING:
    from can_calibrations.calibration.registry import CalibrationRegistry


class QueueListener:
    """Hands calibrated frames to another thread through a queue.

    Each item is a ``(registry, calibrated)`` tuple.
    """

    def __init__(self, target: Optional[queue.Queue] = None) -> None:
        self.queue: queue.Queue = target if target is not None else queue.Queue()

    def process_calibrated_data(
        self,
        registry: CalibrationRegistry,
        calibrated: CalibratedFrame,
    ) -> None:
        self.queue.put((registry, calibrated))


class CollectingListener:
    """Keeps every calibrated frame in memory."""

    def __init__(self) -> None:
        self._results: list[CalibratedFrame] = []
        self._lock = threading.Lock()

    @property
    def results(self) -> list[CalibratedFrame]:
        with self._lock:
            return list(self._results)

    def process_calibrated_data(
        self,
        registry: CalibrationRegistry,
        calibrated: CalibratedFrame,
    ) -> None:
        with self._lock:
            self._results.append(calibrated)

    def clear(self) -> None:
        with self._lock:
            self._results.clear()
