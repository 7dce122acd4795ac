# wxcipher/widgets/text_label.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

from .widget import Widget


class TextLabel(Widget):
    """Plain text line. value is the text itself."""

    def __init__(self, text="", *, visible=True):
        super().__init__(value=text, visible=visible)

    def format_value(self):
        return "" if self._value is None else str(self._value)
