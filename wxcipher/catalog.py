# wxcipher/catalog.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Closed set of weather categories and their static descriptors.
# The enum values are the tokens seen on the wire ("sun", "rain", ...).

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    SUN = "sun"        # clear
    CLOUD = "cloud"    # overcast
    RAIN = "rain"      # light precipitation
    STORM = "storm"    # severe alert
    SNOW = "snow"      # frozen precipitation


@dataclass(frozen=True)
class Descriptor:
    temp_min: int
    temp_max: int
    keyword: str
    label: str


CATALOG = {
    Category.SUN:   Descriptor(25, 35, "MISSION_OK", "Ensoleillé"),
    Category.CLOUD: Descriptor(15, 25, "RETRAIT", "Nuageux"),
    Category.RAIN:  Descriptor(10, 20, "RENFORT", "Pluie légère"),
    Category.STORM: Descriptor(18, 28, "ATTENTION", "Orage"),
    Category.SNOW:  Descriptor(-5, 5, "REPLIEZ", "Neige"),
}

# Used by the sentinel and structured shapes when a midpoint can't be found
FALLBACK_TEMP = 25


def lookup(token):
    """Map a wire token (or a Category) to its Category, or None if unknown."""
    if isinstance(token, Category):
        return token
    try:
        return Category(token)
    except ValueError:
        return None


def descriptor_of(category):
    cat = lookup(category)
    if cat is None:
        return None
    return CATALOG.get(cat)


def midpoint_temperature(category, fallback=FALLBACK_TEMP):
    """
    Rounded (half-up) mean of the category's temperature range.

    Both bounds are integers so the mean is at worst a half-integer;
    (lo + hi + 1) // 2 rounds that toward +infinity, negatives included.
    """
    desc = descriptor_of(category)
    if desc is None:
        return fallback
    return (desc.temp_min + desc.temp_max + 1) // 2
