# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for run metadata normalization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sarifview.models import sarif
from sarifview.normalizers.run import normalize_run, tool_full_name


def _run(**tool: str) -> sarif.Run:
    return sarif.Run(tool=sarif.Tool(**tool))


class TestToolFullName:
    def test_explicit_full_name_wins(self) -> None:
        tool = sarif.Tool(name="Sample", fullName="Sample Analyzer Pro", semanticVersion="1.0")
        assert tool_full_name(tool) == "Sample Analyzer Pro"

    def test_name_and_semantic_version(self) -> None:
        assert tool_full_name(sarif.Tool(name="Sample", semanticVersion="1.0")) == "Sample 1.0"

    def test_bare_name(self) -> None:
        assert tool_full_name(sarif.Tool(name="Sample", version="9")) == "Sample"


class TestNormalizeRun:
    def test_minimal_run(self) -> None:
        info = normalize_run(_run(name="Sample"), 3, "/logs/a.sarif")

        assert info.run_id == 3
        assert info.tool_name == "Sample"
        assert info.tool_full_name == "Sample"
        assert info.cmd_line is None
        assert info.tool_file_name is None
        assert info.working_dir is None
        assert info.uri_base_ids is None
        assert info.additional_properties is None
        assert info.sarif_file_name == "/logs/a.sarif"

    def test_first_invocation_only(self) -> None:
        run = sarif.Run(
            tool=sarif.Tool(name="Sample"),
            invocations=[
                sarif.Invocation(
                    commandLine="sample --all",
                    executableLocation=sarif.FileLocation(uri="file:///bin/sample"),
                    workingDirectory="/work",
                ),
                sarif.Invocation(commandLine="second", workingDirectory="/other"),
            ],
        )
        info = normalize_run(run, 0, "a.sarif")

        assert info.cmd_line == "sample --all"
        assert info.tool_file_name == "file:///bin/sample"
        assert info.working_dir == "/work"

    def test_invocation_without_executable(self) -> None:
        run = sarif.Run(tool=sarif.Tool(name="Sample"), invocations=[sarif.Invocation(commandLine="x")])
        info = normalize_run(run, 0, "a.sarif")
        assert info.cmd_line == "x"
        assert info.tool_file_name is None

    def test_base_ids_and_properties_copied(self) -> None:
        run = sarif.Run(
            tool=sarif.Tool(name="Sample"),
            originalUriBaseIds={"SRCROOT": "file:///src/"},
            properties={"buildId": "42"},
        )
        info = normalize_run(run, 0, "a.sarif")
        assert info.uri_base_ids == {"SRCROOT": "file:///src/"}
        assert info.additional_properties == {"buildId": "42"}

    def test_run_info_is_immutable(self) -> None:
        info = normalize_run(_run(name="Sample"), 0, "a.sarif")
        with pytest.raises(ValidationError):
            info.tool_name = "Other"  # type: ignore[misc]
