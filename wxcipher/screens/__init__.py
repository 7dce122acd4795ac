# screens/__init__.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
from .screen import Screen
from .weather import WeatherScreen

__all__ = ["Screen", "WeatherScreen"]
