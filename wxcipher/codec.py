# wxcipher/codec.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Hidden message token derived from an observation:
#
#   MSG|<KEYWORD>|HEURE_<N>
#
# KEYWORD comes from the category catalog, N is made of the digits of
# the temperature. decode() only rewrites the token text for display;
# it never recovers the temperature.

import re

from .catalog import descriptor_of

TOKEN_PREFIX = "MSG"
TOKEN_SEP = "|"
UNKNOWN_KEYWORD = "INCONNU"
DETAIL_NA = "DETAIL_NA"
DETAIL_PREFIX = "HEURE_"
PHRASE_SEP = " - "

_NON_DIGITS = re.compile(r"[^0-9]")


def temp_to_detail(temperature):
    """Return "HEURE_<digits>" or None if the temperature has no digits."""
    digits = _NON_DIGITS.sub("", str(temperature))
    if not digits:
        return None
    return DETAIL_PREFIX + str(int(digits))


def encode(observation):
    desc = descriptor_of(observation.category)
    keyword = desc.keyword if desc is not None else UNKNOWN_KEYWORD
    detail = temp_to_detail(observation.temperature) or DETAIL_NA
    return TOKEN_SEP.join((TOKEN_PREFIX, keyword, detail))


def decode(token):
    """
    Turn a token back into a readable phrase, e.g.
    "MSG|MISSION_OK|HEURE_30" -> "MISSION OK - HEURE 30".

    Returns None for an empty token or one with fewer than 3 segments.
    """
    if not token:
        return None
    parts = token.split(TOKEN_SEP)
    if len(parts) < 3:
        return None
    return parts[1].replace("_", " ") + PHRASE_SEP + parts[2].replace("_", " ")
