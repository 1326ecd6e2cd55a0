"""Visualization components."""

from can_calibrations.visualization.console import ConsoleListener, configure_logging

__all__ = ["ConsoleListener", "configure_logging"]
