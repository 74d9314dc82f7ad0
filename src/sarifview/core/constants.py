# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fallback constants shared by the normalizers."""

from enum import StrEnum


class Level(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    OPEN = "open"
    PASS = "pass"
    NOT_APPLICABLE = "notApplicable"


class Importance(StrEnum):
    ESSENTIAL = "essential"
    IMPORTANT = "important"
    UNIMPORTANT = "unimportant"


# Rule ``configuration.defaultLevel`` -> result level.  Values missing here
# (pass, notApplicable, anything unknown) fall back to DEFAULT_LEVEL.
DEFAULT_LEVEL_MAP: dict[str, Level] = {
    "error": Level.ERROR,
    "warning": Level.WARNING,
    "note": Level.NOTE,
    "open": Level.OPEN,
}

DEFAULT_LEVEL = Level.WARNING
DEFAULT_IMPORTANCE = Importance.IMPORTANT
DEFAULT_MESSAGE = "No Message Provided"

SUPPORTED_SARIF_VERSION = "2.0.0"
