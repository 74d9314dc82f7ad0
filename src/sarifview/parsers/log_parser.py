# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Decode and validate SARIF log envelopes."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import aiofiles
from pydantic import ValidationError

from sarifview.core.constants import SUPPORTED_SARIF_VERSION
from sarifview.core.exceptions import MalformedLogError, ParseError, UnsupportedVersionError
from sarifview.models.sarif import SarifLog


def parse_log_data(data: Mapping[str, Any], file_path: str = "<memory>") -> SarifLog:
    """Validate an already-deserialized log.

    Raises
    ------
    UnsupportedVersionError
        If the envelope ``version`` is missing or not 2.0.0.
    MalformedLogError
        If a required field (such as a run's ``tool.name``) is missing.
    """
    if not isinstance(data, Mapping):
        raise MalformedLogError(f"{file_path}: top-level SARIF value must be an object")

    version = data.get("version")
    if version != SUPPORTED_SARIF_VERSION:
        raise UnsupportedVersionError(version)

    try:
        return SarifLog.model_validate(data)
    except ValidationError as exc:
        raise MalformedLogError(f"Malformed SARIF log {file_path}: {exc}") from exc


def parse_log_content(raw_content: str, file_path: str = "<stdin>") -> SarifLog:
    """Decode JSON text and validate it as a SARIF log."""
    try:
        data = json.loads(raw_content)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in {file_path}: {exc}") from exc
    return parse_log_data(data, file_path=file_path)


async def parse_log_file(file_path: str) -> SarifLog:
    """Read a ``.sarif`` file from disk and parse it.

    Raises
    ------
    ParseError
        If the file cannot be read or decoded.
    """
    resolved = str(Path(file_path).resolve())
    try:
        async with aiofiles.open(resolved, encoding="utf-8-sig") as fh:
            raw_content = await fh.read()
    except OSError as exc:
        raise ParseError(f"Cannot read {resolved}: {exc}") from exc

    return parse_log_content(raw_content, file_path=resolved)
