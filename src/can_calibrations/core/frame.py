"""Raw CAN frame as handed over by the transport layer."""

from dataclasses import dataclass, field
import time


CAN_STD_ID_MAX = 0x7FF          # 11-bit
CAN_EXT_ID_MAX = 0x1FFFFFFF     # 29-bit
CAN_EFF_FLAG = 0x80000000       # SocketCAN extended frame flag
CAN_CLASSIC_MAX_DLC = 8
CAN_FD_MAX_DLC = 64


@dataclass(frozen=True)
class RawFrame:
    """A single frame received from the bus.

    Attributes:
        frame_id: Identifier as delivered by the transport. May carry SocketCAN
            flag bits (e.g. CAN_EFF_FLAG) above the 29-bit arbitration ID.
        data: Payload bytes (0-8 bytes for classical CAN, up to 64 for CAN FD).
        timestamp: Receive time in seconds since epoch.
        interface: Name of the interface the frame arrived on.
    """

    frame_id: int
    data: bytes = field(default_factory=bytes)
    timestamp: float = field(default_factory=time.time)
    interface: str = "can0"

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

        if len(self.data) > CAN_FD_MAX_DLC:
            raise ValueError(
                f"CAN frame data cannot exceed {CAN_FD_MAX_DLC} bytes, got {len(self.data)}"
            )

        if self.frame_id < 0:
            raise ValueError(f"Frame ID must be non-negative, got {self.frame_id}")

    @property
    def dlc(self) -> int:
        """Number of payload bytes."""
        return len(self.data)

    @property
    def arbitration_id(self) -> int:
        """The 29-bit arbitration ID with transport flag bits stripped."""
        return self.frame_id & CAN_EXT_ID_MAX

    @property
    def is_extended_id(self) -> bool:
        """True if the EFF flag is set or the ID does not fit in 11 bits."""
        return bool(self.frame_id & CAN_EFF_FLAG) or self.arbitration_id > CAN_STD_ID_MAX

    @property
    def is_fd(self) -> bool:
        """True if the payload is longer than a classical frame allows."""
        return len(self.data) > CAN_CLASSIC_MAX_DLC

    def hex_data(self) -> str:
        """Return data as a hex string."""
        return self.data.hex().upper()

    def __repr__(self) -> str:
        id_str = f"{self.frame_id:#010x}" if self.is_extended_id else f"{self.frame_id:#05x}"
        return (
            f"RawFrame(if={self.interface}, id={id_str}, data={self.hex_data()}, "
            f"dlc={self.dlc}, ts={self.timestamp:.6f})"
        )
