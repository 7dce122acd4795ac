import importlib.util
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from wxcipher.classify import ClassificationFailure, classify

TOOL = Path(__file__).resolve().parents[1] / "public" / "tools" / "fake_emitter.py"


@pytest.fixture(scope="module")
def emitter():
    spec = importlib.util.spec_from_file_location("fake_emitter", TOOL)
    module = importlib.util.module_from_spec(spec)
    sys.modules["fake_emitter"] = module
    spec.loader.exec_module(module)
    return module


class RecordingClient:
    def __init__(self):
        self.sent = []

    def publish(self, topic, payload, qos=0):
        self.sent.append((topic, payload, qos))
        return SimpleNamespace(rc=0)


def test_frames_cover_accepted_and_rejected_payloads(emitter):
    results = [classify(f.payload) for f in emitter.FRAMES]
    rejected = [r for r in results if isinstance(r, ClassificationFailure)]

    assert len(rejected) == 3
    assert len(results) - len(rejected) == 10


def test_frames_are_in_time_order(emitter):
    times = [f.t for f in emitter.FRAMES]
    assert times == sorted(times)


def test_peek_shape(emitter):
    assert emitter._peek_shape("MOUVEMENT") == "motion"
    assert emitter._peek_shape('{"motion":1}') == "json"
    assert emitter._peek_shape("rain-12") == "pair"
    assert emitter._peek_shape("hello") == "?"


def test_run_publishes_every_frame(emitter, monkeypatch):
    monkeypatch.setattr(emitter.time, "sleep", lambda s: None)
    client = RecordingClient()

    assert emitter.run(client, "t", 1, speed=10.0, loop=False) == 0
    assert [p for _, p, _ in client.sent] == [f.payload.encode("utf-8") for f in emitter.FRAMES]
    assert {(t, q) for t, _, q in client.sent} == {("t", 1)}


def test_run_rejects_bad_speed(emitter):
    assert emitter.run(RecordingClient(), "t", 0, speed=0, loop=False) == 2
