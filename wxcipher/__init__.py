# wxcipher/__init__.py
# SPDX-FileCopyrightText: Copyright (c) 2026 Christopher Piggott
# SPDX-License-Identifier: MIT
from .catalog import CATALOG, Category, Descriptor, descriptor_of, lookup, midpoint_temperature
from .classify import (
    EMPTY_PAYLOAD,
    PAYLOAD_MALFORMED,
    PAYLOAD_UNRECOGNIZED,
    ClassificationFailure,
    Observation,
    classify,
)
from .codec import decode, encode
from .reveal import ACCESS_DENIED, NOTHING_TO_SHOW, SHOWN, RevealGate, RevealResult
from .session import WxSession

__all__ = [
    "ACCESS_DENIED",
    "CATALOG",
    "Category",
    "ClassificationFailure",
    "Descriptor",
    "EMPTY_PAYLOAD",
    "NOTHING_TO_SHOW",
    "Observation",
    "PAYLOAD_MALFORMED",
    "PAYLOAD_UNRECOGNIZED",
    "RevealGate",
    "RevealResult",
    "SHOWN",
    "WxSession",
    "classify",
    "decode",
    "descriptor_of",
    "encode",
    "lookup",
    "midpoint_temperature",
]
