# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for CLI commands: show and steps."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sarifview.cli.app import app

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
SARIF_DIR = FIXTURES_DIR / "sarif"
SOURCE_ROOT = FIXTURES_DIR / "src"

runner = CliRunner()

SAMPLE = str(SARIF_DIR / "sample.sarif")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SARIFVIEW_SOURCE_ROOT", str(SOURCE_ROOT))
    monkeypatch.setenv("SARIFVIEW_LOG_LEVEL", "WARNING")
    yield
    # The CLI callback binds a handler to the runner's stderr
    logger = logging.getLogger("sarifview")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


class TestShow:
    def test_console(self) -> None:
        result = runner.invoke(app, ["show", SAMPLE])
        assert result.exit_code == 0
        assert "Sample 1.0" in result.output
        assert "C001" in result.output
        assert "Buffer 'buf' may overflow." in result.output
        assert "Summary: 2 results" in result.output

    def test_json(self) -> None:
        result = runner.invoke(app, ["show", SAMPLE, "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["runs"][0]["tool_full_name"] == "Sample 1.0"
        assert len(data["results"]) == 2
        first = data["results"][0]
        assert first["severity_level"] == "error"
        assert first["assigned_location"]["snippet"] == "strcpy(buf, argv[1])"
        assert data["results"][1]["locations"] == [None]

    def test_json_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "out.json"
        result = runner.invoke(app, ["show", SAMPLE, "-f", "json", "-o", str(out)])
        assert result.exit_code == 0
        assert "Output written to" in result.output
        assert json.loads(out.read_text())["runs"][0]["run_id"] == 0

    def test_source_root_option(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", SAMPLE, "-f", "json", "--source-root", str(tmp_path)])
        assert result.exit_code == 0
        location = json.loads(result.stdout)["results"][0]["assigned_location"]
        assert location["mapped"] is False
        assert location["snippet"] is None

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(tmp_path / "nope.sarif")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unsupported_version(self, tmp_path: Path) -> None:
        path = tmp_path / "new.sarif"
        path.write_text(json.dumps({"version": "2.1.0", "runs": []}))
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
        assert "Unsupported SARIF version" in result.output

    def test_invalid_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SARIFVIEW_RESOLVE_CONCURRENCY", "0")
        result = runner.invoke(app, ["show", SAMPLE])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


# ---------------------------------------------------------------------------
# steps
# ---------------------------------------------------------------------------


class TestSteps:
    def test_default_verbosity(self) -> None:
        result = runner.invoke(app, ["steps", SAMPLE, "-d", "app/main.c", "-f", "json"])
        assert result.exit_code == 0
        lenses = json.loads(result.stdout)
        assert [lens["command"]["title"] for lens in lenses] == ["[1] argv enters here", "[2] main.c"]
        assert lenses[0]["range"]["start_line"] == 4
        assert lenses[0]["command"]["arguments"] == ["0_0_0"]

    def test_document_given_as_file_uri(self) -> None:
        document = (SOURCE_ROOT / "app" / "main.c").absolute().as_uri()
        result = runner.invoke(app, ["steps", SAMPLE, "-d", document, "-f", "json"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 2

    def test_unimportant_verbosity(self) -> None:
        result = runner.invoke(
            app, ["steps", SAMPLE, "-d", "app/main.c", "-v", "unimportant", "-f", "json"]
        )
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 3

    def test_console_table(self) -> None:
        result = runner.invoke(app, ["steps", SAMPLE, "-d", "app/main.c", "-v", "essential"])
        assert result.exit_code == 0
        assert "Code-flow steps" in result.output
        assert "argv enters here" in result.output

    def test_result_without_code_flows(self) -> None:
        result = runner.invoke(app, ["steps", SAMPLE, "-d", "app/main.c", "-r", "1"])
        assert result.exit_code == 0
        assert "No code-flow steps" in result.output

    def test_result_index_out_of_range(self) -> None:
        result = runner.invoke(app, ["steps", SAMPLE, "-d", "app/main.c", "-r", "5"])
        assert result.exit_code == 1
        assert "out of range" in result.output
