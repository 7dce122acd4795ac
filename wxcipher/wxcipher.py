# wxcipher/wxcipher.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
"""
Console weather panel driven by MQTT sensor payloads, with a hidden
message that only shows up for the right passphrase.

Examples:
  python -m wxcipher
  python -m wxcipher --transport tcp --mqtt-port 1883 --mqtt-host broker.local
  python -m wxcipher --offline          # no broker; inject with "p rain-12"
"""

from __future__ import annotations

import argparse
import sys

from . import config
from .classify import Observation
from .dialmqtt import DialMQTT
from .display import TextDisplay
from .router import T_OBSERVATION, Router
from .screens import WeatherScreen
from .session import WxSession


class WxCipher:
    def __init__(self, args, *, stream=None):
        self.args = args
        self.display = TextDisplay(stream)
        self.router = Router()
        self.screen = WeatherScreen()
        self.session = WxSession(self.render, secret=args.secret, verbose=args.verbose)
        self.mqtt = None

    def render(self, observation):
        """Rendering sink: fan the observation out, then repaint if needed."""
        self.router.publish(T_OBSERVATION, observation)
        self.display.refresh()

    def _build_mqtt(self):
        a = self.args
        return DialMQTT(
            a.mqtt_host,
            port=a.mqtt_port,
            client_id=a.client_id,
            transport=a.transport,
            ws_path=a.ws_path,
            tls=a.tls,
            username=a.mqtt_username,
            password=a.mqtt_password,
            keep_alive=a.keepalive,
            qos=a.qos,
            reconnect_min_s=config.RECONNECT_MIN_S,
            reconnect_max_s=config.RECONNECT_MAX_S,
            on_payload=self.session.on_payload,
        )

    def start(self):
        n = self.router.register(self.screen)
        if self.args.verbose:
            print("WeatherScreen subscriptions:", n)

        # paint the default state in one frame
        self.session.show(Observation(config.DEFAULT_CATEGORY, config.DEFAULT_TEMP))
        self.display.root_group = self.screen
        self.screen.on_show()

        if not self.args.offline:
            self.mqtt = self._build_mqtt()
            self.mqtt.subscribe(self.args.topic)
            self.mqtt.start()

    def stop(self):
        if self.mqtt is not None:
            self.mqtt.stop()
            self.mqtt = None
        self.screen.on_hide()

    def handle(self, line, prompt=None):
        """
        Run one console command. Returns False when it's time to quit.

        prompt asks for the passphrase; defaults to input().
        """
        cmd, _, arg = line.strip().partition(" ")
        cmd = cmd.lower()

        if not cmd:
            return True

        if self.screen.input(cmd, arg):
            return True

        if cmd == config.CMD_QUIT:
            return False

        if cmd == config.CMD_REVEAL:
            passphrase = (prompt or input)(config.REVEAL_PROMPT)
            print(self.session.attempt_reveal(passphrase).message)
        elif cmd == config.CMD_PAYLOAD:
            self.session.on_payload(arg, "console")
        elif cmd == config.CMD_STATS:
            for k, v in self.session.stats.items():
                print(f"{k}: {v}")
        else:
            print(f"Commands: {config.CMD_REVEAL} (reveal), {config.CMD_PAYLOAD} <payload>, "
                  f"{config.CMD_STATS} (stats), {config.CMD_QUIT} (quit)")
        return True

    def run(self):
        self.start()
        try:
            while True:
                try:
                    line = input()
                except EOFError:
                    break
                if not self.handle(line):
                    break
        except KeyboardInterrupt:
            print("\nStopped.")
        finally:
            self.stop()
        return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="MQTT weather panel with a passphrase-gated hidden message.")
    ap.add_argument("--mqtt-host", default=config.MQTT_HOST, help=f"MQTT broker hostname (default: {config.MQTT_HOST})")
    ap.add_argument("--mqtt-port", type=int, default=config.MQTT_PORT, help=f"MQTT broker port (default: {config.MQTT_PORT})")
    ap.add_argument("--mqtt-username", default=None, help="MQTT username (optional)")
    ap.add_argument("--mqtt-password", default=None, help="MQTT password (optional)")
    ap.add_argument("--topic", default=config.MQTT_TOPIC, help=f"MQTT topic to subscribe to (default: {config.MQTT_TOPIC})")
    ap.add_argument("--qos", type=int, default=config.MQTT_QOS, choices=[0, 1, 2], help="Subscription QoS (default: 0)")
    ap.add_argument("--transport", default=config.MQTT_TRANSPORT, choices=["websockets", "tcp"],
                    help=f"MQTT transport (default: {config.MQTT_TRANSPORT})")
    ap.add_argument("--ws-path", default=config.MQTT_WS_PATH, help=f"Websocket path (default: {config.MQTT_WS_PATH})")
    ap.add_argument("--tls", action="store_true", help="Enable TLS")
    ap.add_argument("--client-id", default=None, help="Optional MQTT client id (default: auto)")
    ap.add_argument("--keepalive", type=int, default=config.MQTT_KEEPALIVE, help="MQTT keepalive seconds (default: 60)")
    ap.add_argument("--secret", default=config.REVEAL_SECRET, help="Passphrase that unlocks the hidden message")
    ap.add_argument("--offline", action="store_true", help="Don't connect to a broker; inject payloads with 'p <payload>'")
    ap.add_argument("--verbose", action="store_true", help="Log every payload, including ignored ones")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if not args.secret:
        print("--secret must not be empty", file=sys.stderr)
        return 2
    return WxCipher(args).run()


if __name__ == "__main__":
    raise SystemExit(main())
