# wxcipher/reveal.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Passphrase gate in front of the hidden message.
#
# The gate is LOCKED except for the instant a phrase is handed out; a
# successful reveal does not leave it open for the next attempt.

from .codec import decode

# gate states
LOCKED = 0
REVEALED = 1

# attempt outcomes
SHOWN = "SHOWN"
ACCESS_DENIED = "ACCESS_DENIED"
NOTHING_TO_SHOW = "NOTHING_TO_SHOW"

_MESSAGES = {
    ACCESS_DENIED: "Accès refusé.",
    NOTHING_TO_SHOW: "Rien à afficher.",
}


class RevealResult:
    __slots__ = ("status", "phrase")

    def __init__(self, status, phrase=None):
        self.status = status
        self.phrase = phrase

    @property
    def ok(self):
        return self.status == SHOWN

    @property
    def message(self):
        """Text to put in front of the user."""
        if self.ok:
            return self.phrase
        return _MESSAGES[self.status]

    def __repr__(self):
        return f"<RevealResult {self.status} {self.phrase!r}>"


class RevealGate:
    def __init__(self, secret, *, on_reveal=None):
        if not secret:
            raise ValueError("reveal secret must not be empty")
        self._secret = secret
        self._on_reveal = on_reveal   # callable(phrase), runs while REVEALED
        self.state = LOCKED

    def attempt(self, passphrase, token):
        """
        Check the passphrase, then decode token.

        Returns a RevealResult; never raises for a bad passphrase or token.
        """
        supplied = (passphrase or "").strip()
        if not supplied or supplied != self._secret:
            return RevealResult(ACCESS_DENIED)

        phrase = decode(token)
        if phrase is None:
            return RevealResult(NOTHING_TO_SHOW)

        self.state = REVEALED
        try:
            if self._on_reveal is not None:
                self._on_reveal(phrase)
        finally:
            self.state = LOCKED
        return RevealResult(SHOWN, phrase)
