# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for normalized SARIF logs."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sarifview import __version__
from sarifview.core.constants import Level
from sarifview.models.location import ByteRange, CharRange, LineColumnRange, ResolvedLocation
from sarifview.models.result import ResultInfo
from sarifview.models.run import RunInfo
from sarifview.presentation.code_flow_lens import CodeLens
from sarifview.session import SarifSession

console = Console()

LEVEL_COLORS = {
    Level.ERROR: "bold red",
    Level.WARNING: "yellow",
    Level.NOTE: "cyan",
    Level.OPEN: "magenta",
    Level.PASS: "green",
    Level.NOT_APPLICABLE: "dim",
}

LEVEL_ORDER = [Level.ERROR, Level.WARNING, Level.NOTE, Level.OPEN, Level.PASS, Level.NOT_APPLICABLE]


def describe_location(location: ResolvedLocation | None) -> str:
    if location is None:
        return "<no location>"
    rng = location.range
    if isinstance(rng, LineColumnRange):
        where = f"{location.uri}:{rng.start_line}:{rng.start_column}"
    elif isinstance(rng, CharRange):
        where = f"{location.uri} @char {rng.offset}+{rng.length}"
    elif isinstance(rng, ByteRange):
        where = f"{location.uri} @byte {rng.offset}+{rng.length}"
    else:
        where = location.uri
    if not location.mapped:
        where += " (file missing)"
    return where


def _print_run(run: RunInfo, results: list[ResultInfo]) -> None:
    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Run:", str(run.run_id))
    info_table.add_row("Tool:", run.tool_full_name)
    if run.cmd_line:
        info_table.add_row("Command:", run.cmd_line)
    if run.working_dir:
        info_table.add_row("Working dir:", run.working_dir)
    info_table.add_row("Results:", str(len(results)))
    console.print(info_table)
    console.print()

    for result in results:
        color = LEVEL_COLORS.get(result.severity_level, "white")
        console.print(Text(result.severity_level.upper().ljust(14), style=color), end="")
        line = Text("  ")
        line.append(result.rule_id or "-", style="bold")
        line.append(f"  {result.message.text}")
        console.print(line)
        console.print(f"                {describe_location(result.assigned_location)}", style="dim")
        if result.code_flows:
            steps = sum(cf.step_count for cf in result.code_flows)
            console.print(f"                Code flows: {len(result.code_flows)} ({steps} steps)", style="dim")
        console.print()


def format_session(session: SarifSession) -> None:
    """Print every run of *session* with its results."""
    console.print()
    console.print(f"[bold]sarifview v{__version__}[/bold]")
    console.print()

    for run in session.runs:
        _print_run(run, session.results_for_run(run.run_id))

    counts: dict[Level, int] = {}
    for result in session.results:
        counts[result.severity_level] = counts.get(result.severity_level, 0) + 1
    parts = [f"{counts[lvl]} {lvl}" for lvl in LEVEL_ORDER if lvl in counts]
    summary = ", ".join(parts) if parts else "0 results"
    console.print(f"  Summary: {len(session.results)} results ({summary})")
    console.print()


def format_steps(lenses: list[CodeLens]) -> None:
    """Print code-flow step markers as a table."""
    if not lenses:
        console.print("  No code-flow steps for this document.", style="dim")
        return

    table = Table(title="Code-flow steps")
    table.add_column("Step", style="bold")
    table.add_column("Range")
    table.add_column("Command", style="dim")
    for lens in lenses:
        rng = lens.range
        if isinstance(rng, LineColumnRange):
            where = f"{rng.start_line}:{rng.start_column}"
        elif rng is not None:
            where = f"{rng.kind} {rng.offset}+{rng.length}"
        else:
            where = "-"
        table.add_row(lens.command.title, where, lens.command.command)
    console.print(table)
