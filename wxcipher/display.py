# wxcipher/display.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Text stand-in for a displayio display: a tree of Groups whose leaves
# paint themselves as lines of text, and a display that prints the
# active root group whenever something in it changed.

import sys


class Group:
    """Ordered container of children, like displayio.Group."""

    def __init__(self):
        self._children = []
        self.hidden = False

    def append(self, child):
        self._children.append(child)

    def remove(self, child):
        self._children.remove(child)

    def __iter__(self):
        return iter(self._children)

    def __len__(self):
        return len(self._children)

    def refresh(self, force=False):
        """Refresh every child; True if any of them repainted."""
        changed = False
        for child in self._children:
            if hasattr(child, "refresh") and child.refresh(force):
                changed = True
        return changed

    def lines(self):
        if self.hidden:
            return []
        out = []
        for child in self._children:
            out.extend(child.lines())
        return out


class TextDisplay:
    def __init__(self, stream=None, *, width=32):
        self._stream = stream if stream is not None else sys.stdout
        self._root = None
        self.width = width
        self.frames = 0

    @property
    def root_group(self):
        return self._root

    @root_group.setter
    def root_group(self, group):
        self._root = group
        if group is not None:
            self.refresh(force=True)

    def refresh(self, force=False):
        """Paint the root group if it changed. Returns True if painted."""
        if self._root is None:
            return False
        if not self._root.refresh(force) and not force:
            return False

        border = "+" + "-" * self.width + "+"
        body = [border]
        for line in self._root.lines():
            body.append("|" + line.center(self.width)[: self.width] + "|")
        body.append(border)
        print("\n".join(body), file=self._stream, flush=True)
        self.frames += 1
        return True
