# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Flatten a SARIF run into :class:`RunInfo`."""

from __future__ import annotations

from sarifview.models import sarif
from sarifview.models.run import RunInfo


def tool_full_name(tool: sarif.Tool) -> str:
    """``fullName``, else ``"<name> <semanticVersion>"``, else ``name``."""
    if tool.fullName is not None:
        return tool.fullName
    if tool.semanticVersion is not None:
        return f"{tool.name} {tool.semanticVersion}"
    return tool.name


def normalize_run(run: sarif.Run, run_id: int, sarif_file_name: str) -> RunInfo:
    cmd_line: str | None = None
    tool_file_name: str | None = None
    working_dir: str | None = None

    # Only the first invocation describes the run.
    if run.invocations:
        invocation = run.invocations[0]
        cmd_line = invocation.commandLine
        if invocation.executableLocation is not None:
            tool_file_name = invocation.executableLocation.uri
        working_dir = invocation.workingDirectory

    return RunInfo(
        run_id=run_id,
        tool_name=run.tool.name,
        tool_full_name=tool_full_name(run.tool),
        cmd_line=cmd_line,
        tool_file_name=tool_file_name,
        working_dir=working_dir,
        additional_properties=run.properties,
        uri_base_ids=dict(run.originalUriBaseIds) if run.originalUriBaseIds is not None else None,
        sarif_file_name=sarif_file_name,
    )
