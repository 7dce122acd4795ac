# wxcipher/widgets/wx_icon.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Category-aware icon widget: maps a category token to a glyph.
# Unknown categories get the clear-sky glyph.

from ..catalog import Category, lookup
from .widget import Widget

CATEGORY_ICONS = {
    Category.SUN:   "☀️",
    Category.CLOUD: "☁️",
    Category.RAIN:  "🌧️",
    Category.STORM: "⛈️",
    Category.SNOW:  "❄️",
}

DEFAULT_ICON = CATEGORY_ICONS[Category.SUN]


def category_icon(token) -> str:
    cat = lookup(token)
    if cat is None:
        return DEFAULT_ICON
    return CATEGORY_ICONS.get(cat, DEFAULT_ICON)


class WxIcon(Widget):
    """
    Weather icon widget that understands category tokens.

    Adds:
      - set_category(token): category -> glyph

    The raw token is kept (even if unknown) so repeated unknown tokens
    don't repaint.
    """

    def __init__(self, *, category=None, visible=True):
        super().__init__(value=None, visible=visible)
        if category is not None:
            self.set_category(category)

    def set_category(self, token, *, verbose=False):
        changed = token != self._value
        if verbose and changed:
            print("icon:", token, "->", category_icon(token))
        self.set(value=token)
        return changed

    @property
    def category(self):
        return self._value

    def format_value(self):
        if self._value is None:
            return ""
        return category_icon(self._value)
