# wxcipher/dialmqtt.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

import ssl

import paho.mqtt.client as mqtt


class DialMQTT:
    """
    Thin paho-mqtt wrapper that feeds every delivered payload to one
    handler.

    Behavior:
      - Connects asynchronously; paho's network thread handles IO and
        reconnects with backoff between reconnect_min_s and reconnect_max_s.
      - Remembers subscriptions and resubscribes on every (re)connect.
      - Decodes payloads as UTF-8 (raw bytes if that fails) and calls
        on_payload(text, topic). Handler errors are printed, never raised
        into the network loop.

    Typical use:
        self.mqtt = DialMQTT("broker.hivemq.com", port=8000, on_payload=session.on_payload)
        self.mqtt.subscribe("home/esp32s3/pir/mouvement")
        self.mqtt.start()
    """

    # simple internal states
    _IDLE = 0
    _CONNECTING = 1
    _CONNECTED = 2

    def __init__(
        self,
        broker,
        *,
        port=8000,
        client_id="",
        transport="websockets",
        ws_path="/mqtt",
        tls=False,
        username=None,
        password=None,
        keep_alive=60,
        qos=0,
        reconnect_min_s=1,
        reconnect_max_s=30,
        on_payload=None,
    ):
        self._broker = broker
        self._port = int(port)
        self._keep_alive = keep_alive
        self._qos = qos
        self._transport = transport
        self.on_payload = on_payload

        self._state = self._IDLE
        self._subs = set()
        self.received = 0

        self._client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id or "",
            transport=transport,
        )

        if transport == "websockets":
            self._client.ws_set_options(path=ws_path)

        if username is not None:
            self._client.username_pw_set(username, password)

        if tls:
            self._client.tls_set(cert_reqs=ssl.CERT_REQUIRED)

        self._client.on_connect = self._on_connect
        self._client.on_disconnect = self._on_disconnect
        self._client.on_message = self._on_message

        # Auto-reconnect tuning
        self._client.reconnect_delay_set(min_delay=reconnect_min_s, max_delay=reconnect_max_s)

    # ---- MQTT callbacks ----

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        if reason_code.is_failure:
            print(f"MQTT connect failed: {reason_code}")
            self._state = self._CONNECTING
            return

        print(f"MQTT connected to {self._broker}:{self._port} ({self._transport})")
        self._state = self._CONNECTED

        # Resubscribe everything
        for topic in sorted(self._subs):
            print("Subscribing:", topic)
            client.subscribe(topic, qos=self._qos)

    def _on_disconnect(self, client, userdata, flags, reason_code, properties=None):
        if self._state == self._IDLE:
            print("MQTT disconnected.")
            return
        print(f"MQTT disconnected unexpectedly: {reason_code} (will auto-reconnect)")
        self._state = self._CONNECTING

    def _on_message(self, client, userdata, msg):
        try:
            payload = msg.payload.decode("utf-8")
        except UnicodeDecodeError:
            payload = msg.payload

        self.received += 1
        if self.on_payload is None:
            return

        try:
            self.on_payload(payload, msg.topic)
        except Exception as e:
            print("MQTT handler error:", msg.topic, e)

    # ---- public API ----

    @property
    def connected(self):
        return self._state == self._CONNECTED

    def subscribe(self, topic):
        """
        Remember subscription and apply immediately if connected.
        """
        if not topic:
            return
        self._subs.add(topic)

        if self._state == self._CONNECTED:
            print("Subscribing:", topic)
            self._client.subscribe(topic, qos=self._qos)

    def start(self):
        """Begin connecting and start the network thread. Doesn't block."""
        print(f"Connecting MQTT to {self._broker}:{self._port} ...")
        self._state = self._CONNECTING
        self._client.connect_async(self._broker, self._port, keepalive=self._keep_alive)
        self._client.loop_start()

    def stop(self):
        self._state = self._IDLE
        self._client.disconnect()
        self._client.loop_stop()
