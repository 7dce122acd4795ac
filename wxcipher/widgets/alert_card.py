# wxcipher/widgets/alert_card.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

from .widget import Widget


class AlertCard(Widget):
    """
    Alert banner, hidden until armed.

    show()/hide() only flip visibility; the banner text is fixed at
    construction.
    """

    def __init__(self, text="ALERTE MÉTÉO", *, visible=False):
        super().__init__(value=text, visible=visible)

    @property
    def shown(self):
        return not self.hidden

    def show(self):
        self.hidden = False

    def hide(self):
        self.hidden = True

    def format_value(self):
        return f"!! {self._value} !!"
