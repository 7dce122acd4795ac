# widgets/__init__.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
from .widget import Widget
from .temp_text import TempText
from .wx_icon import WxIcon
from .text_label import TextLabel
from .alert_card import AlertCard

__all__ = [
    "AlertCard",
    "TempText",
    "TextLabel",
    "Widget",
    "WxIcon",
]
