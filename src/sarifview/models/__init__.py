# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for sarifview."""

from sarifview.models.location import ByteRange, CharRange, LineColumnRange, Range, ResolvedLocation
from sarifview.models.message import FormattedMessage, LinkSpan, TextSpan
from sarifview.models.result import (
    Attachment,
    CodeFlow,
    NavigationCommand,
    ResultInfo,
    Step,
    ThreadFlow,
)
from sarifview.models.run import RunInfo

__all__ = [
    "Attachment",
    "ByteRange",
    "CharRange",
    "CodeFlow",
    "FormattedMessage",
    "LineColumnRange",
    "LinkSpan",
    "NavigationCommand",
    "Range",
    "ResolvedLocation",
    "ResultInfo",
    "RunInfo",
    "Step",
    "TextSpan",
    "ThreadFlow",
]
