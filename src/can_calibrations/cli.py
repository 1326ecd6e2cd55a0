"""Command-line interface for can-calibrations."""

import logging
from typing import Optional

import click
from rich.console import Console

from can_calibrations import __version__
from can_calibrations.calibration.registry import CalibrationRegistry
from can_calibrations.calibration.signal import Signal
from can_calibrations.config import CalibrationConfig
from can_calibrations.core.endianness import Endianness, HOST_ENDIANNESS
from can_calibrations.core.frame import RawFrame
from can_calibrations.errors import ConfigurationError
from can_calibrations.visualization.console import ConsoleListener, configure_logging


console = Console()

SIGNAL_SPEC_HELP = "name:start_bit:length[:big|little[:signed|unsigned[:gain[:offset[:unit]]]]]"


def parse_signal_spec(spec: str) -> Signal:
    """Build a Signal from its inline command-line form."""
    parts = spec.split(":")
    if len(parts) < 3 or len(parts) > 8:
        raise ValueError(f"expected {SIGNAL_SPEC_HELP}, got {spec!r}")

    name, start_bit, length = parts[0], parts[1], parts[2]
    endianness = parts[3] if len(parts) > 3 and parts[3] else Endianness.LITTLE.value
    signedness = parts[4].lower() if len(parts) > 4 and parts[4] else "unsigned"
    if signedness not in ("signed", "unsigned"):
        raise ValueError(f"signedness must be 'signed' or 'unsigned', got {signedness!r}")

    return Signal(
        name=name,
        start_bit=int(start_bit, 0),
        data_length=int(length, 0),
        endianness=endianness,
        is_signed=signedness == "signed",
        gain=float(parts[5]) if len(parts) > 5 and parts[5] else 1.0,
        offset=float(parts[6]) if len(parts) > 6 and parts[6] else 0.0,
        unit=parts[7] if len(parts) > 7 else "",
    )


def parse_payload(payload: str) -> bytes:
    """Parse a hex payload, allowing an optional "0x" prefix and whitespace."""
    s = "".join(payload.split()).lower()
    if s.startswith("0x"):
        s = s[2:]
    if len(s) % 2 != 0:
        raise ValueError(f"Hex string must have even length, got {len(s)}")
    return bytes.fromhex(s)


def _signals_callback(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[Signal]:
    signals = []
    for spec in value:
        try:
            signals.append(parse_signal_spec(spec))
        except (ValueError, ConfigurationError) as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param) from None
    return signals


def _payload_callback(ctx: click.Context, param: click.Parameter, value: str) -> bytes:
    try:
        return parse_payload(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from None


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """can-calibrations - decode CAN frames into engineering values."""
    pass


@main.command()
def host() -> None:
    """Show the byte order of this machine."""
    console.print(f"Host byte order: [bold]{HOST_ENDIANNESS.value}[/bold]-endian")


@main.command()
@click.argument("frame_id", type=lambda s: int(s, 0))
@click.argument("payload", callback=_payload_callback)
@click.option(
    "--signal",
    "-s",
    "signals",
    multiple=True,
    required=True,
    callback=_signals_callback,
    help=f"Signal definition: {SIGNAL_SPEC_HELP}",
)
@click.option("--timestamp", "-t", default=0.0, help="Frame timestamp in seconds")
@click.option("--interface", "-i", default="can0", help="Interface name recorded on the frame")
@click.option(
    "--host",
    "host_order",
    type=click.Choice([e.value for e in Endianness]),
    default=None,
    help="Override the host byte order",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def decode(
    ctx: click.Context,
    frame_id: int,
    payload: bytes,
    signals: list[Signal],
    timestamp: float,
    interface: str,
    host_order: Optional[str],
    verbose: bool,
) -> None:
    """Decode one frame with inline signal definitions."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    listener = ConsoleListener(console)
    config = CalibrationConfig(host_endianness=host_order or HOST_ENDIANNESS)
    registry = CalibrationRegistry(listener=listener, config=config)
    registry.add_frame(frame_id, signals)

    try:
        frame = RawFrame(frame_id=frame_id, data=payload, timestamp=timestamp, interface=interface)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx) from None

    if verbose:
        listener.print_signals(frame_id, signals)
    listener.print_frame(frame)
    result = registry.calibrate(frame)
    if not result.ok:
        listener.print_failure(result)
        ctx.exit(1)


if __name__ == "__main__":
    main()
