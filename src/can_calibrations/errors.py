"""Exception types raised by can-calibrations."""


class CalibrationError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(CalibrationError, ValueError):
    """A signal or frame definition describes an impossible layout.

    Raised when the definition is built, never while decoding a frame.
    """
