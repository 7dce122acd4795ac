# wxcipher/session.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

import threading

from .classify import (
    EMPTY_PAYLOAD,
    PAYLOAD_MALFORMED,
    PAYLOAD_UNRECOGNIZED,
    ClassificationFailure,
    classify,
)
from .codec import encode
from .reveal import RevealGate


class WxSession:
    """
    One running session: payloads in, renders and hidden tokens out.

    Owns the "latest token" slot. It is created empty, overwritten by
    every accepted payload and read (never consumed) by attempt_reveal().

    render is the rendering sink, callable(Observation). It is called
    exactly once per accepted payload and never for a rejected one.

    paho delivers on its network thread while the console runs on the
    main thread; on_payload, show and attempt_reveal hold one lock so
    renders and token writes never overlap.
    """

    def __init__(self, render, *, secret, verbose=False, on_reveal=None):
        self._render = render
        self._gate = RevealGate(secret, on_reveal=on_reveal)
        self._token = None
        self._lock = threading.Lock()
        self.verbose = verbose

        self.stats = {
            "accepted": 0,
            EMPTY_PAYLOAD: 0,
            PAYLOAD_UNRECOGNIZED: 0,
            PAYLOAD_MALFORMED: 0,
        }

    @property
    def latest_token(self):
        return self._token

    def clear_token(self):
        self._token = None

    def on_payload(self, raw, topic=None):
        """
        Transport callback. Returns the Observation or the
        ClassificationFailure, for callers that care; the transport doesn't.
        """
        result = classify(raw)
        with self._lock:
            return self._consume(raw, topic, result)

    def _consume(self, raw, topic, result):
        if isinstance(result, ClassificationFailure):
            self.stats[result.reason] += 1
            if result.reason == PAYLOAD_MALFORMED:
                print("Payload malformed:", repr(raw), "-", result.detail)
            elif self.verbose:
                print("Payload ignored:", result.reason, repr(raw))
            return result

        if self.verbose:
            print("Observation on", topic, ":", result.category, result.temperature)

        self._render(result)
        self._token = encode(result)
        self.stats["accepted"] += 1
        return result

    def show(self, observation):
        """Render without touching the token slot (startup default state)."""
        with self._lock:
            self._render(observation)

    def attempt_reveal(self, passphrase):
        with self._lock:
            return self._gate.attempt(passphrase, self._token)
