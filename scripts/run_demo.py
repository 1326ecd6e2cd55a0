from __future__ import annotations

import argparse
import queue
import random
import threading
import time

from can_calibrations import (
    CalibrationRegistry,
    Endianness,
    QueueListener,
    RawFrame,
    Signal,
)


ENGINE_ID = 0x0CF00400
BRAKE_ID = 0x18FEF100


def engine_signals() -> list[Signal]:
    return [
        Signal(name="engine_speed", start_bit=24, data_length=16, gain=0.125, unit="rpm"),
        Signal(name="torque", start_bit=16, data_length=8, gain=1.0, offset=-125.0, unit="%"),
    ]


def brake_signals() -> list[Signal]:
    return [
        Signal(name="wheel_speed", start_bit=8, data_length=16, gain=1 / 256, unit="km/h"),
        Signal(
            name="brake_pressure",
            start_bit=32,
            data_length=16,
            endianness=Endianness.BIG,
            is_signed=True,
            gain=0.1,
            unit="bar",
        ),
    ]


def produce(registry: CalibrationRegistry, rng: random.Random, duration_s: float, period_ms: int) -> int:
    # Stands in for the transport's listening loop: one frame per ID per period.
    sent = 0
    deadline = time.monotonic() + duration_s
    while time.monotonic() < deadline:
        for frame_id in (ENGINE_ID, BRAKE_ID, 0x123):
            payload = bytes(rng.randrange(256) for _ in range(8))
            registry.on_frame(RawFrame(frame_id=frame_id, data=payload, interface="vcan0"))
            sent += 1
        time.sleep(period_ms / 1000)
    return sent


def main() -> None:
    parser = argparse.ArgumentParser(description="Run can-calibrations demo pipeline.")
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed for reproducible payloads.")
    parser.add_argument("--duration-s", type=float, default=1.0, help="Demo duration in seconds.")
    parser.add_argument("--period-ms", type=int, default=20, help="Frame period in milliseconds.")
    args = parser.parse_args()

    listener = QueueListener()
    registry = CalibrationRegistry(listener=listener)
    registry.add_frame(ENGINE_ID, engine_signals())

    producer = threading.Thread(
        target=produce,
        args=(registry, random.Random(args.seed), args.duration_s, args.period_ms),
        daemon=True,
    )
    producer.start()

    # Reconfigure while frames are flowing.
    time.sleep(args.duration_s / 2)
    registry.add_frame(BRAKE_ID, brake_signals())
    producer.join()

    counts: dict[int, int] = {}
    last = {}
    while True:
        try:
            _, calibrated = listener.queue.get_nowait()
        except queue.Empty:
            break
        counts[calibrated.frame_id] = counts.get(calibrated.frame_id, 0) + 1
        last[calibrated.frame_id] = calibrated

    print("=== Demo complete ===")
    for frame_id in sorted(counts):
        print(f"{frame_id:#010x}: {counts[frame_id]:5d} frames, last {last[frame_id]!r}")
    print(f"Unknown IDs:      {', '.join(f'{i:#x}' for i in sorted(registry.unknown_ids)) or '-'}")


if __name__ == "__main__":
    main()
