# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized run metadata."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RunInfo(BaseModel):
    """One analysis run, flattened for display."""

    model_config = ConfigDict(frozen=True)

    run_id: int
    tool_name: str
    tool_full_name: str
    cmd_line: str | None = None
    tool_file_name: str | None = None
    working_dir: str | None = None
    additional_properties: dict[str, Any] | None = None
    uri_base_ids: dict[str, str] | None = None
    sarif_file_name: str
