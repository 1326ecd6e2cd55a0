"""Console rendering of calibration results using Rich."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from can_calibrations.calibration.results import CalibratedFrame, CalibrationFailure
from can_calibrations.calibration.signal import Signal
from can_calibrations.core.frame import RawFrame

if TYPE_CHECKING:
    from can_calibrations.calibration.registry import CalibrationRegistry


def configure_logging(level: int = logging.WARNING, console: Optional[Console] = None) -> None:
    """Route package logging through a RichHandler."""
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


class ConsoleListener:
    """CalibrationListener that prints every calibrated frame as a table."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def process_calibrated_data(
        self,
        registry: CalibrationRegistry,
        calibrated: CalibratedFrame,
    ) -> None:
        self.print_calibrated(calibrated)

    def print_frame(self, frame: RawFrame) -> None:
        """Print a single raw frame."""
        data_str = " ".join(f"{b:02X}" for b in frame.data)

        self.console.print(
            f"[dim]{frame.interface}[/dim] "
            f"[cyan]{frame.frame_id:#05x}[/cyan] "
            f"[dim]DLC={frame.dlc}[/dim] "
            f"[green]{data_str}[/green]"
        )

    def print_calibrated(self, calibrated: CalibratedFrame) -> None:
        """Print the signals of a calibrated frame."""
        table = Table(title=f"Frame {calibrated.frame_id:#05x} @ {calibrated.timestamp:.6f}")

        table.add_column("Signal", style="cyan")
        table.add_column("Value", justify="right", style="green")
        table.add_column("Unit")
        table.add_column("Raw", justify="right", style="dim")

        for name in sorted(calibrated.signals):
            datum = calibrated.signals[name]
            table.add_row(name, f"{datum.value:.6g}", datum.unit, str(datum.raw_value))

        self.console.print(table)

    def print_failure(self, failure: CalibrationFailure) -> None:
        """Print why a frame produced no data."""
        self.console.print(f"[yellow]{type(failure).__name__}[/yellow] {failure.message}")

    def print_signals(self, frame_id: int, signals: list[Signal]) -> None:
        """Print the signal layout registered for a frame."""
        lines = "\n".join(repr(signal) for signal in signals) or "no signals"
        self.console.print(Panel(lines, title=f"Definition {frame_id:#05x}"))
