# wxcipher/classify.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
#
# Classify raw sensor payloads into a normalized Observation.
#
# Three payload shapes are understood, tried in order (first match wins):
#
#   MOUVEMENT / PAS_DE_MOUVEMENT     sentinel motion tokens
#   rain-12                          "<category>-<temperature>" pair
#   {"motion": 1, "temp": 23.4}      JSON record
#
# Nothing in here raises on bad input; failures come back as a
# ClassificationFailure carrying one of the reason codes below.

import json
import math
import re
from dataclasses import dataclass

from .catalog import Category, FALLBACK_TEMP, midpoint_temperature

# --- failure reasons ---

EMPTY_PAYLOAD = "EMPTY_PAYLOAD"
PAYLOAD_UNRECOGNIZED = "PAYLOAD_UNRECOGNIZED"
PAYLOAD_MALFORMED = "PAYLOAD_MALFORMED"

# --- recognizer tags ---

MATCHED = "matched"
NOT_APPLICABLE = "not_applicable"
INVALID = "invalid"

MOTION_TOKEN = "MOUVEMENT"
NO_MOTION_TOKEN = "PAS_DE_MOUVEMENT"
PAIR_SEPARATOR = "-"

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Observation:
    category: str
    temperature: int


class ClassificationFailure:
    __slots__ = ("reason", "detail")

    def __init__(self, reason, detail=None):
        self.reason = reason
        self.detail = detail

    def __eq__(self, other):
        return isinstance(other, ClassificationFailure) and other.reason == self.reason

    def __hash__(self):
        return hash(self.reason)

    def __repr__(self):
        if self.detail:
            return f"<ClassificationFailure {self.reason}: {self.detail}>"
        return f"<ClassificationFailure {self.reason}>"


def classify(raw):
    """
    Main entry point: normalize, then run the recognizers in order.

    Returns: Observation, or ClassificationFailure
    """
    if raw is None:
        return ClassificationFailure(EMPTY_PAYLOAD)

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError:
            return ClassificationFailure(PAYLOAD_UNRECOGNIZED, "not utf-8")

    text = str(raw).strip()
    if not text:
        return ClassificationFailure(EMPTY_PAYLOAD)

    for recognizer in RECOGNIZERS:
        tag, value = recognizer(text)
        if tag == NOT_APPLICABLE:
            continue
        if tag == INVALID:
            return ClassificationFailure(PAYLOAD_MALFORMED, value)
        return _validate(*value)

    return ClassificationFailure(PAYLOAD_UNRECOGNIZED)


def _validate(category, temperature):
    if not isinstance(category, str) or not category:
        return ClassificationFailure(PAYLOAD_MALFORMED, "no category")
    # bool is an int subclass; it is never a temperature
    if isinstance(temperature, bool) or not isinstance(temperature, int):
        return ClassificationFailure(PAYLOAD_MALFORMED, "no temperature")
    return Observation(category, temperature)


# --- recognizers ---
#
# Each takes the trimmed payload text and returns (tag, value):
#   (MATCHED, (category, temperature))
#   (NOT_APPLICABLE, None)
#   (INVALID, "why")


def recognize_motion(text):
    """
    Example:
      MOUVEMENT         -> storm at the storm midpoint
      PAS_DE_MOUVEMENT  -> sun at the sun midpoint
    """
    if text == MOTION_TOKEN:
        cat = Category.STORM
    elif text == NO_MOTION_TOKEN:
        cat = Category.SUN
    else:
        return NOT_APPLICABLE, None
    return MATCHED, (cat.value, midpoint_temperature(cat, FALLBACK_TEMP))


def recognize_pair(text):
    """
    Example:
      rain-12   -> ("rain", 12)
      snow--3   -> ("snow", -3)
      rain-abc  -> INVALID
      -25       -> not a pair (valid JSON, left to the record shape)

    The category token is passed through as-is, known or not.
    """
    if _parses_as_json(text):
        return NOT_APPLICABLE, None

    head, sep, tail = text.partition(PAIR_SEPARATOR)
    if not sep:
        return NOT_APPLICABLE, None

    # allow one leading minus on the temperature, nothing else
    rest = tail.lstrip()
    if rest.startswith(PAIR_SEPARATOR):
        rest = rest[1:]
    if PAIR_SEPARATOR in rest:
        return NOT_APPLICABLE, None

    category = head.strip()
    temp_str = tail.strip()
    if not category:
        return INVALID, "empty category"
    if not _SIGNED_INT.fullmatch(temp_str):
        return INVALID, f"bad temperature {temp_str!r}"

    try:
        temperature = int(temp_str)
    except ValueError:
        # past the interpreter's int digit limit
        return INVALID, "temperature too long"

    return MATCHED, (category, temperature)


def recognize_record(text):
    """
    Example:
      {"motion": 1, "temp": 23.7}  -> ("storm", 23)
      {"motion": false}            -> ("sun", <sun midpoint>)
      {"temp": 12}                 -> ("", 12), rejected later (no category)
      {"motion": null, "temp": 12} -> same as above

    A null motion counts as absent, not as falsy: it derives no category,
    so the record is rejected as malformed rather than shown as clear.
    """
    try:
        msg = json.loads(text)
    except (ValueError, RecursionError):
        return NOT_APPLICABLE, None

    if not isinstance(msg, dict):
        return NOT_APPLICABLE, None

    category = ""
    motion = msg.get("motion")
    if motion is not None:
        category = (Category.STORM if motion else Category.SUN).value

    temp = msg.get("temp")
    if _is_finite_number(temp):
        temperature = int(temp)     # truncates toward zero
    else:
        temperature = midpoint_temperature(category or Category.SUN, FALLBACK_TEMP)

    return MATCHED, (category, temperature)


def _is_finite_number(x):
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        # int too large for a float
        return False


def _parses_as_json(text):
    try:
        json.loads(text)
    except (ValueError, RecursionError):
        return False
    return True


RECOGNIZERS = (
    recognize_motion,
    recognize_pair,
    recognize_record,
)
