# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized result, attachment and code-flow models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from sarifview.core.constants import DEFAULT_IMPORTANCE, Importance, Level
from sarifview.models.location import ResolvedLocation
from sarifview.models.message import FormattedMessage


class NavigationCommand(BaseModel):
    """Ready-to-invoke command descriptor attached to a code-flow step."""

    model_config = ConfigDict(frozen=True)

    title: str
    command: str
    arguments: list[str] = Field(default_factory=list)


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    trace_id: str
    step_number: int
    location: ResolvedLocation | None = None
    importance: Importance = DEFAULT_IMPORTANCE
    message: str | None = None
    is_last_in_thread: bool = False
    command: NavigationCommand
    # Passthrough, rendered opaquely by the presentation layer
    kind: str | None = None
    module: str | None = None
    nesting_level: int | None = None
    execution_order: int | None = None
    state: dict[str, Any] | None = None
    timestamp: str | None = None


class ThreadFlow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    message: str | None = None
    steps: list[Step] = Field(default_factory=list)


class CodeFlow(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str | None = None
    threads: list[ThreadFlow] = Field(default_factory=list)

    @property
    def step_count(self) -> int:
        return sum(len(t.steps) for t in self.threads)


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: FormattedMessage | None = None
    file: ResolvedLocation
    regions_of_interest: list[ResolvedLocation] | None = None


class ResultInfo(BaseModel):
    """A single finding, flattened for display.

    ``locations`` always holds at least one element; ``None`` entries are
    placeholders for locations the log did not supply.
    """

    model_config = ConfigDict(frozen=True)

    run_id: int
    locations: list[ResolvedLocation | None] = Field(min_length=1)
    related_locs: list[ResolvedLocation | None] = Field(default_factory=list)
    attachments: list[Attachment] | None = None
    code_flows: list[CodeFlow] = Field(default_factory=list)
    rule_id: str | None = None
    rule_name: str | None = None
    rule_help_uri: str | None = None
    rule_description: FormattedMessage | None = None
    severity_level: Level
    message: FormattedMessage
    additional_properties: dict[str, Any] | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def assigned_location(self) -> ResolvedLocation | None:
        return self.locations[0]

    @property
    def all_locations(self) -> list[ResolvedLocation | None]:
        return [*self.locations, *self.related_locs]
