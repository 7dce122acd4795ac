#!/usr/bin/env python3
"""
Replay a scripted stream of sensor payloads to an MQTT topic.

- Publishes the payloads exactly as listed (UTF-8, no trailing newline).
- Preserves the relative timing between frames using their timestamps.
- Covers every payload shape the panel understands, plus a few it
  must ignore (malformed / unrecognized), so the console log shows both.
- Supports looping and speed scaling.

Example:
  python fake_emitter.py
  python fake_emitter.py --mqtt-host broker.local --transport tcp --mqtt-port 1883
  python fake_emitter.py --loop --speed 4.0   # 4x faster
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import List

import paho.mqtt.client as mqtt


@dataclass(frozen=True)
class Frame:
    t: float      # seconds, used only for relative timing
    payload: str


FRAMES: List[Frame] = [
    Frame(0.0, "sun-31"),
    Frame(2.0, "cloud-18"),
    Frame(4.0, "PAS_DE_MOUVEMENT"),
    Frame(6.5, "rain-12"),
    Frame(8.0, "MOUVEMENT"),
    Frame(10.0, r'{"motion":1,"temp":23.6}'),
    Frame(12.0, r'{"motion":0}'),
    Frame(14.0, "snow--3"),
    Frame(15.0, "storm-abc"),          # malformed: bad temperature
    Frame(16.0, "hello"),              # unrecognized
    Frame(17.5, r'{"temp":19}'),       # malformed: no category
    Frame(19.0, "fog-7"),              # unknown category, still shown
    Frame(21.0, "rain-14"),
]


def _peek_shape(payload: str) -> str:
    # Rough label for the log line; the panel does the real classification
    text = payload.strip()
    if text in ("MOUVEMENT", "PAS_DE_MOUVEMENT"):
        return "motion"
    if text.startswith("{"):
        return "json"
    if "-" in text:
        return "pair"
    return "?"


def run(client, topic: str, qos: int, speed: float, loop: bool) -> int:
    if not FRAMES:
        print("No frames to send.", file=sys.stderr)
        return 2

    if speed <= 0:
        print("--speed must be > 0", file=sys.stderr)
        return 2

    # Precompute inter-frame delays (seconds), then scale by speed.
    times = [f.t for f in FRAMES]
    delays = [0.0] + [max(0.0, times[i] - times[i - 1]) for i in range(1, len(times))]
    delays = [d / speed for d in delays]

    print(f"Publishing {len(FRAMES)} payloads to {topic}")
    print(f"  speed={speed}x  loop={'on' if loop else 'off'}")
    print("Ctrl+C to stop.\n")

    try:
        while True:
            for i, frame in enumerate(FRAMES):
                if delays[i] > 0:
                    time.sleep(delays[i])

                info = client.publish(topic, frame.payload.encode("utf-8"), qos=qos)
                if info.rc != mqtt.MQTT_ERR_SUCCESS:
                    print(f"publish failed rc={info.rc}: {frame.payload!r}", file=sys.stderr)
                    continue

                print(f"[{frame.t:0.2f}] -> {topic}  {_peek_shape(frame.payload):6}  {frame.payload}")

            if not loop:
                break

            # Tiny breather between loops so logs are readable
            time.sleep(0.25)

        return 0
    except KeyboardInterrupt:
        print("\nStopped.")
        return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Replay scripted sensor payloads to an MQTT topic.")
    ap.add_argument("--mqtt-host", default="broker.hivemq.com", help="MQTT broker hostname (default: broker.hivemq.com)")
    ap.add_argument("--mqtt-port", type=int, default=8000, help="MQTT broker port (default: 8000)")
    ap.add_argument("--transport", default="websockets", choices=["websockets", "tcp"], help="MQTT transport (default: websockets)")
    ap.add_argument("--ws-path", default="/mqtt", help="Websocket path (default: /mqtt)")
    ap.add_argument("--topic", default="home/esp32s3/pir/mouvement", help="Topic to publish to")
    ap.add_argument("--qos", type=int, default=0, choices=[0, 1, 2], help="Publish QoS (default: 0)")
    ap.add_argument("--speed", type=float, default=1.0, help="Replay speed multiplier (default: 1.0)")
    ap.add_argument("--loop", action="store_true", help="Loop forever.")
    args = ap.parse_args()

    client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, transport=args.transport)
    if args.transport == "websockets":
        client.ws_set_options(path=args.ws_path)

    try:
        print(f"Connecting MQTT to {args.mqtt_host}:{args.mqtt_port} ...")
        client.connect(args.mqtt_host, args.mqtt_port, keepalive=30)
    except OSError as e:
        print(f"MQTT connect failed: {e}", file=sys.stderr)
        return 2

    client.loop_start()
    try:
        return run(client, args.topic, args.qos, args.speed, args.loop)
    finally:
        client.disconnect()
        client.loop_stop()


if __name__ == "__main__":
    raise SystemExit(main())
