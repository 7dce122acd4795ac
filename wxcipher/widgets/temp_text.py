# wxcipher/widgets/temp_text.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

from .widget import Widget


class TempText(Widget):
    """
    Temperature display widget.

    - value: numeric temperature (int) or None
    - meta:
        {
            "unit": "C" or "F",        # default "C"
            "auto_color": True/False   # default True
        }

    Renders "<t>°C". With auto_color the band name ("cold", "mild",
    "warm", "hot") is kept in self.color.
    """

    def __init__(self, *, unit="C", auto_color=True, visible=True):
        super().__init__(value=None, meta={"unit": unit, "auto_color": auto_color}, visible=visible)
        self.color = None

    # ---- formatting ----

    def format_value(self):
        v = self._value
        unit = self._meta.get("unit", "C")

        if v is None:
            return f"--°{unit}"

        try:
            return f"{int(round(v))}°{unit}"
        except (TypeError, ValueError):
            return f"{v}°{unit}"

    # ---- rendering ----

    def _render(self, dirty_flags):
        if dirty_flags & (self.DIRTY_VALUE | self.DIRTY_META):
            self.text = self.format_value()

            if self._meta.get("auto_color", True):
                self.color = self._temp_color(self._value)

    # ---- color logic ----

    def _temp_color(self, t):
        """
        Basic stepped temperature bands, Celsius.
        """
        if t is None:
            return None

        try:
            t = float(t)
        except (TypeError, ValueError):
            return None

        if t <= 0:
            return "cold"
        elif t <= 15:
            return "mild"
        elif t <= 27:
            return "warm"
        else:
            return "hot"
