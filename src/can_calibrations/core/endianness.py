"""Byte order of signal fields and of the host machine."""

from __future__ import annotations

import sys
from enum import Enum


class Endianness(Enum):
    """Byte ordering for multi-byte signals."""

    BIG = "big"
    LITTLE = "little"

    @classmethod
    def coerce(cls, value: Endianness | str) -> Endianness:
        """Accept an Endianness or one of the strings "big" / "little"."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown byte order {value!r}, expected 'big' or 'little'") from None


def detect_host_endianness() -> Endianness:
    """Return the byte order of the running interpreter's platform."""
    return Endianness(sys.byteorder)


# Resolved once per process. Pass it explicitly where a byte order is needed.
HOST_ENDIANNESS = detect_host_endianness()
