import io

import pytest

from wxcipher import wxcipher as app_mod
from wxcipher.wxcipher import WxCipher, build_parser, main


class FakeLink:
    def __init__(self, broker, **kwargs):
        self.broker = broker
        self.kwargs = kwargs
        self.topics = []
        self.started = False
        self.stopped = False

    def subscribe(self, topic):
        self.topics.append(topic)

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True


@pytest.fixture
def offline():
    stream = io.StringIO()
    app = WxCipher(build_parser().parse_args(["--offline"]), stream=stream)
    app.start()
    return app, stream


def test_defaults_come_from_config():
    args = build_parser().parse_args([])
    assert args.mqtt_host == "broker.hivemq.com"
    assert args.mqtt_port == 8000
    assert args.transport == "websockets"
    assert args.topic == "home/esp32s3/pir/mouvement"
    assert args.secret == "Q-KEY"


def test_start_paints_default_state_without_token(offline):
    app, stream = offline

    assert app.display.frames == 1
    assert "25°C" in stream.getvalue()
    assert "Ensoleillé" in stream.getvalue()
    assert app.session.latest_token is None
    assert app.mqtt is None


def test_injected_payload_then_reveal(offline, capsys):
    app, stream = offline

    assert app.handle("p rain-12")
    assert app.session.latest_token == "MSG|RENFORT|HEURE_12"
    assert "Pluie légère" in stream.getvalue()

    assert app.handle("M", prompt=lambda text: "Q-KEY")
    assert "RENFORT - HEURE 12" in capsys.readouterr().out


def test_reveal_denied(offline, capsys):
    app, _ = offline
    app.handle("p rain-12")

    app.handle("m", prompt=lambda text: "nope")
    assert "Accès refusé." in capsys.readouterr().out


def test_reveal_with_nothing_stored(offline, capsys):
    app, _ = offline

    app.handle("m", prompt=lambda text: "Q-KEY")
    assert "Rien à afficher." in capsys.readouterr().out


def test_stats_help_and_quit(offline, capsys):
    app, _ = offline
    app.handle("p hello")

    assert app.handle("s")
    assert "PAYLOAD_UNRECOGNIZED: 1" in capsys.readouterr().out
    assert app.handle("?")
    assert "Commands" in capsys.readouterr().out
    assert app.handle("")
    assert not app.handle("q")


def test_online_start_subscribes_and_stops(monkeypatch):
    monkeypatch.setattr(app_mod, "DialMQTT", FakeLink)
    app = WxCipher(build_parser().parse_args(["--topic", "x/y", "--transport", "tcp"]), stream=io.StringIO())

    app.start()
    link = app.mqtt
    assert link.broker == "broker.hivemq.com"
    assert link.kwargs["transport"] == "tcp"
    assert link.kwargs["on_payload"] == app.session.on_payload
    assert link.topics == ["x/y"]
    assert link.started

    app.stop()
    assert link.stopped
    assert app.mqtt is None


def test_main_runs_until_eof(monkeypatch, capsys):
    lines = iter(["p snow--3", "m"])

    def fake_input(prompt=""):
        if prompt:
            return "Q-KEY"
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["--offline"]) == 0
    assert "REPLIEZ - HEURE 3" in capsys.readouterr().out


def test_main_rejects_empty_secret(capsys):
    assert main(["--offline", "--secret", ""]) == 2
