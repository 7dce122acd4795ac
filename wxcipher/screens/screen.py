# screens/screen.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

#
# Base class for all screens.
#
from ..display import Group


class Screen(Group):
    def __init__(self, *, title=None):
        super().__init__()
        self.title = title

    # ---- lifecycle ----

    def on_show(self):
        """Called when this screen becomes the active screen."""
        pass

    def on_hide(self):
        """Called when this screen is no longer the active screen."""
        pass

    # ---- input / update ----

    def input(self, command, argument=None):
        """
        Sent to the screen to handle console commands.

        Return True if handled (consumed), False otherwise.
        """
        return False

    def lines(self):
        body = super().lines()
        if self.title and body:
            return [self.title] + body
        return body
