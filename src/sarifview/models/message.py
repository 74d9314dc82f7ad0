# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Formatted message models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from sarifview.models.location import ResolvedLocation


class TextSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class LinkSpan(BaseModel):
    """An embedded ``[label](N)`` reference resolved to a location."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["link"] = "link"
    text: str
    target_index: int
    location: ResolvedLocation


MessageSpan = Annotated[TextSpan | LinkSpan, Field(discriminator="kind")]


class FormattedMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    spans: list[MessageSpan] = Field(default_factory=list)

    @property
    def links(self) -> list[LinkSpan]:
        return [s for s in self.spans if isinstance(s, LinkSpan)]

    def __str__(self) -> str:
        return self.text
