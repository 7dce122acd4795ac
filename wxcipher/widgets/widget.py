# wxcipher/widgets/widget.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

#
# Base class for all widgets.
#
from ..display import Group


class Widget(Group):
    """
    Base widget: has a primary value plus optional metadata dict.

    - value: primary value (number, category token, ...) or None
    - meta: optional dict for extra fields
    - label: optional widget title/caption

    Subclasses typically:
      - override _render() to turn state into self.text
      - optionally override format_value()

    set() only marks the widget dirty when something actually changed,
    so pushing the same state twice costs nothing and repaints nothing.
    """

    DIRTY_VALUE = 1
    DIRTY_LABEL = 2
    DIRTY_META = 4
    DIRTY_HIDDEN = 8
    DIRTY_ALL = 15

    def __init__(self, *, label=None, value=None, meta=None, visible=True):
        super().__init__()
        self._label = label
        self._value = value
        self._meta = meta if meta is not None else {}
        self._hidden = not visible
        self._dirty = self.DIRTY_ALL
        self.text = ""

    # ---- properties ----

    @property
    def label(self):
        return self._label

    @label.setter
    def label(self, s):
        if s != self._label:
            self._label = s
            self._dirty |= self.DIRTY_LABEL

    @property
    def value(self):
        return self._value

    @property
    def meta(self):
        return self._meta

    @property
    def hidden(self):
        return self._hidden

    @hidden.setter
    def hidden(self, h):
        h = bool(h)
        # Group.__init__ assigns hidden before our state exists
        if getattr(self, "_hidden", None) == h:
            return
        self._hidden = h
        if hasattr(self, "_dirty"):
            self._dirty |= self.DIRTY_HIDDEN

    @property
    def dirty(self):
        return self._dirty != 0

    # ---- updates ----

    def set(self, value=None, meta=None, *, label=None):
        """
        Set one or more fields. Any change marks widget dirty.
        """
        if label is not None and label != self._label:
            self._label = label
            self._dirty |= self.DIRTY_LABEL

        if value != self._value:
            self._value = value
            self._dirty |= self.DIRTY_VALUE

        if meta is not None and meta != self._meta:
            self._meta = meta
            self._dirty |= self.DIRTY_META

    # ---- rendering ----

    def refresh(self, force=False):
        """
        If dirty (or forced), push internal state into self.text.
        Returns True if anything was repainted.
        """
        if force:
            self._dirty = self.DIRTY_ALL

        if not self._dirty:
            return False

        self._render(self._dirty)
        self._dirty = 0
        return True

    def _render(self, dirty_flags):
        if dirty_flags & (self.DIRTY_VALUE | self.DIRTY_LABEL):
            self.text = self.format_value()

    def lines(self):
        if self._hidden or not self.text:
            return []
        return [self.text]

    # ---- formatting helpers ----

    def format_value(self):
        """
        Subclasses can override. Default formatting for numeric value.
        """
        v = self._value
        if v is None:
            return "--"
        # Keep it simple: ints stay ints, floats get trimmed
        if isinstance(v, float):
            if v.is_integer():
                return str(int(v))
            return "{:.1f}".format(v)
        return str(v)
