# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from sarifview.core.config import Settings, get_settings
from sarifview.core.constants import Importance
from sarifview.core.exceptions import ConfigurationError, SarifViewError
from sarifview.core.logging import setup_logging
from sarifview.session import SarifSession

app = typer.Typer(
    name="sarifview",
    help="Normalize and inspect SARIF 2.0.0 logs",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Override SARIFVIEW_LOG_LEVEL")
    ] = None,
) -> None:
    settings = _current_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


def _current_settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


def _settings_for(source_root: Path | None) -> Settings:
    settings = _current_settings()
    if source_root is not None:
        settings = settings.model_copy(update={"source_root": source_root})
    return settings


def _load(sarif_file: Path, settings: Settings) -> SarifSession:
    from sarifview.sdk import load_log_file

    try:
        return asyncio.run(load_log_file(sarif_file, settings=settings))
    except SarifViewError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


@app.command()
def show(
    sarif_file: Annotated[Path, typer.Argument(help="SARIF log to load")],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    source_root: Annotated[
        Path | None,
        typer.Option("--source-root", help="Directory relative uris are resolved against"),
    ] = None,
) -> None:
    """Load a SARIF log and print its runs and results."""
    session = _load(sarif_file, _settings_for(source_root))

    if fmt == OutputFormat.CONSOLE:
        from sarifview.cli.formatters.console import format_session
        format_session(session)
    else:
        from sarifview.cli.formatters.json_fmt import format_json
        _write_output(format_json(session), output)


@app.command()
def steps(
    sarif_file: Annotated[Path, typer.Argument(help="SARIF log to load")],
    document: Annotated[
        str, typer.Option("--document", "-d", help="Document uri to place step markers in")
    ],
    result_index: Annotated[
        int, typer.Option("--result", "-r", help="Index of the result to activate")
    ] = 0,
    verbosity: Annotated[
        Importance | None,
        typer.Option("--verbosity", "-v", help="Step importance threshold"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    source_root: Annotated[
        Path | None,
        typer.Option("--source-root", help="Directory relative uris are resolved against"),
    ] = None,
) -> None:
    """List the code-flow step markers of one result for one document."""
    from sarifview.presentation.code_flow_lens import CodeFlowLensProvider

    session = _load(sarif_file, _settings_for(source_root))
    results = session.results
    if not 0 <= result_index < len(results):
        typer.secho(
            f"Error: result index {result_index} out of range (0-{len(results) - 1})",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    session.set_active_result(results[result_index])
    if verbosity is not None:
        session.set_verbosity(verbosity)
    lenses = CodeFlowLensProvider(session).provide(document)

    if fmt == OutputFormat.CONSOLE:
        from sarifview.cli.formatters.console import format_steps
        format_steps(lenses)
    else:
        from sarifview.cli.formatters.json_fmt import format_json_steps
        _write_output(format_json_steps(lenses), None)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text)
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")
