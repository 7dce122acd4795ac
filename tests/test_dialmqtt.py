from types import SimpleNamespace

import pytest

from wxcipher import dialmqtt
from wxcipher.dialmqtt import DialMQTT

OK = SimpleNamespace(is_failure=False)
REFUSED = SimpleNamespace(is_failure=True)


class FakeClient:
    instances = []

    def __init__(self, callback_api_version, client_id="", transport="tcp"):
        self.callback_api_version = callback_api_version
        self.client_id = client_id
        self.transport = transport
        self.ws_path = None
        self.credentials = None
        self.tls = None
        self.reconnect_delay = None
        self.subscribed = []
        self.connected_to = None
        self.looping = False
        self.disconnected = False
        FakeClient.instances.append(self)

    def ws_set_options(self, path="/mqtt", headers=None):
        self.ws_path = path

    def username_pw_set(self, username, password=None):
        self.credentials = (username, password)

    def tls_set(self, **kwargs):
        self.tls = kwargs

    def reconnect_delay_set(self, min_delay=1, max_delay=120):
        self.reconnect_delay = (min_delay, max_delay)

    def connect_async(self, host, port=1883, keepalive=60):
        self.connected_to = (host, port, keepalive)

    def loop_start(self):
        self.looping = True

    def loop_stop(self):
        self.looping = False

    def disconnect(self):
        self.disconnected = True

    def subscribe(self, topic, qos=0):
        self.subscribed.append((topic, qos))


@pytest.fixture
def fake_client(monkeypatch):
    FakeClient.instances.clear()
    monkeypatch.setattr(dialmqtt.mqtt, "Client", FakeClient)
    return FakeClient


def message(topic, payload):
    return SimpleNamespace(topic=topic, payload=payload)


def test_websocket_client_setup(fake_client):
    DialMQTT("broker.hivemq.com", port=8000, ws_path="/mqtt", username="u", password="p")
    client = fake_client.instances[-1]

    assert client.callback_api_version == dialmqtt.mqtt.CallbackAPIVersion.VERSION2
    assert client.transport == "websockets"
    assert client.ws_path == "/mqtt"
    assert client.credentials == ("u", "p")
    assert client.tls is None
    assert client.reconnect_delay == (1, 30)


def test_tcp_client_skips_websocket_options(fake_client):
    DialMQTT("localhost", port=1883, transport="tcp", tls=True)
    client = fake_client.instances[-1]

    assert client.transport == "tcp"
    assert client.ws_path is None
    assert client.tls is not None


def test_start_and_stop(fake_client):
    link = DialMQTT("localhost", port=1883, keep_alive=30)
    client = fake_client.instances[-1]

    link.start()
    assert client.connected_to == ("localhost", 1883, 30)
    assert client.looping

    link.stop()
    assert client.disconnected
    assert not client.looping


def test_subscriptions_are_applied_on_every_connect(fake_client):
    link = DialMQTT("localhost", qos=1)
    client = fake_client.instances[-1]

    link.subscribe("home/esp32s3/pir/mouvement")
    link.subscribe("")
    assert client.subscribed == []

    link._on_connect(client, None, {}, OK)
    assert link.connected
    assert client.subscribed == [("home/esp32s3/pir/mouvement", 1)]

    link._on_disconnect(client, None, {}, OK)
    assert not link.connected

    link._on_connect(client, None, {}, OK)
    assert client.subscribed == [("home/esp32s3/pir/mouvement", 1)] * 2


def test_subscribe_while_connected_is_immediate(fake_client):
    link = DialMQTT("localhost")
    client = fake_client.instances[-1]
    link._on_connect(client, None, {}, OK)

    link.subscribe("a/b")
    assert client.subscribed == [("a/b", 0)]


def test_refused_connect(fake_client, capsys):
    link = DialMQTT("localhost")
    client = fake_client.instances[-1]
    link.subscribe("a/b")

    link._on_connect(client, None, {}, REFUSED)

    assert not link.connected
    assert client.subscribed == []
    assert "connect failed" in capsys.readouterr().out


def test_messages_are_decoded_and_handed_over(fake_client):
    got = []
    link = DialMQTT("localhost", on_payload=lambda payload, topic: got.append((payload, topic)))

    link._on_message(None, None, message("t", b"rain-12"))
    link._on_message(None, None, message("t", b"\xff"))

    assert got == [("rain-12", "t"), (b"\xff", "t")]
    assert link.received == 2


def test_handler_errors_stay_out_of_the_network_loop(fake_client, capsys):
    def boom(payload, topic):
        raise RuntimeError("render failed")

    link = DialMQTT("localhost", on_payload=boom)
    link._on_message(None, None, message("t", b"rain-12"))

    assert "MQTT handler error" in capsys.readouterr().out
