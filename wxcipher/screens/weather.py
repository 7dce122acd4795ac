# screens/weather.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT

from ..catalog import Category, descriptor_of
from ..router import T_OBSERVATION, subscribe
from ..widgets import AlertCard, TempText, TextLabel, WxIcon
from .screen import Screen

DEFAULT_LABEL = "Clair"

# categories that arm the alert card
ALERT_CATEGORIES = (Category.RAIN.value,)


def category_label(token):
    desc = descriptor_of(token)
    if desc is None:
        return DEFAULT_LABEL
    return desc.label


class WeatherScreen(Screen):
    """
    Icon, temperature, description, and an alert card that only shows
    for light rain.
    """

    def __init__(self, *, title="Météo"):
        super().__init__(title=title)

        self.icon = WxIcon()
        self.append(self.icon)

        self.temp = TempText(unit="C")
        self.append(self.temp)

        self.desc = TextLabel()
        self.append(self.desc)

        self.alert = AlertCard()
        self.append(self.alert)

        self.last = None

    @subscribe(T_OBSERVATION)
    def on_observation(self, obs):
        self.last = obs
        self.icon.set_category(obs.category)
        self.temp.set(value=obs.temperature)
        self.desc.set(value=category_label(obs.category))

        if obs.category in ALERT_CATEGORIES:
            self.alert.show()
        else:
            self.alert.hide()
