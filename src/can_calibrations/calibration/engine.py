"""Bit extraction and calibration of individual signals.

Everything in this module is a pure function of its arguments. The host
byte order is a parameter rather than a global lookup so both the
little-endian and the big-endian branch can be exercised on any machine.

Decoding a signal goes through these steps:

1. The payload is assembled into one unsigned 64-bit integer, byte 0 being
   the least significant byte. Bytes past the eighth fall off the top and
   missing bytes read as zero.
2. The field is cut out of that integer with a shift and a mask.
3. Unsigned fields that are already in host order (or fit in one byte) are
   scaled as they are.
4. Everything else is narrowed to the smallest fixed-width container
   (8/16/32/64 bits, at least 16 for unsigned fields), byte swapped within
   that container if the field's byte order differs from the host's, and
   read as two's complement when the signal is signed.

Sign extension in step 4 starts at the top bit of the container, not at the
top bit of the field. A 12-bit signed field lives in a 16-bit container and
its bit 11 is *not* treated as the sign bit; only bit 15 is. Callers relying
on narrower signed fields have to account for that.
"""

from __future__ import annotations

from typing import Optional

from can_calibrations.calibration.results import CalibratedDatum
from can_calibrations.calibration.signal import MAX_SIGNAL_BITS, Signal
from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS
from can_calibrations.core.frame import RawFrame


MASK64 = (1 << 64) - 1

UNSIGNED_WIDTHS = (16, 32, 64)
SIGNED_WIDTHS = (8, 16, 32, 64)


def bit_mask(length: int) -> int:
    """All-ones mask covering the low ``length`` bits."""
    return (1 << length) - 1


def byteswap(value: int, width: int) -> int:
    """Reverse the byte order of ``value`` within a ``width``-bit container."""
    raw = (value & bit_mask(width)).to_bytes(width // 8, byteorder="little")
    return int.from_bytes(raw, byteorder="big")


def to_signed(value: int, width: int) -> int:
    """Reinterpret the low ``width`` bits of ``value`` as two's complement."""
    value &= bit_mask(width)
    if value & (1 << (width - 1)):
        return value - (1 << width)
    return value


def container_width(data_length: int, is_signed: bool) -> int:
    """Smallest fixed-width integer size that holds ``data_length`` bits."""
    widths = SIGNED_WIDTHS if is_signed else UNSIGNED_WIDTHS
    for width in widths:
        if data_length <= width:
            return width
    raise ValueError(f"No integer container holds {data_length} bits")


def assemble_payload(data: bytes) -> int:
    """Pack payload bytes into an unsigned 64-bit integer, byte 0 lowest."""
    return int.from_bytes(data, byteorder="little") & MASK64


def extract_bits(
    assembled: int,
    start_bit: int,
    data_length: int,
    host: Endianness | str = HOST_ENDIANNESS,
) -> int:
    """Cut a ``data_length``-bit field at ``start_bit`` out of an assembled payload."""
    host = Endianness.coerce(host)
    mask = bit_mask(data_length)
    if host is Endianness.BIG:
        return ((assembled << start_bit) & MASK64) & byteswap(mask, 64)
    return (assembled >> start_bit) & mask


def calibrate_signal(
    signal: Signal,
    frame: RawFrame,
    host: Endianness | str = HOST_ENDIANNESS,
) -> Optional[CalibratedDatum]:
    """Decode and scale one signal out of a frame.

    Returns None when the signal cannot be taken from this frame, which
    happens when the payload is too short to hold the field.
    """
    if signal.data_length > MAX_SIGNAL_BITS:
        return None
    if not signal.fits(len(frame.data)):
        return None

    host = Endianness.coerce(host)
    bits = extract_bits(assemble_payload(frame.data), signal.start_bit, signal.data_length, host)
    matches_host = signal.endianness is host

    if not signal.is_signed and (matches_host or signal.data_length <= 8):
        return _datum(signal, frame, bits)

    width = container_width(signal.data_length, signal.is_signed)
    narrowed = bits & bit_mask(width)
    if not matches_host and width > 8:
        narrowed = byteswap(narrowed, width)
    if signal.is_signed:
        narrowed = to_signed(narrowed, width)

    return _datum(signal, frame, narrowed)


def _datum(signal: Signal, frame: RawFrame, raw_value: int) -> CalibratedDatum:
    return CalibratedDatum(
        timestamp=frame.timestamp,
        name=signal.name,
        unit=signal.unit,
        value=float(raw_value) * signal.gain + signal.offset,
        raw_value=raw_value,
    )
