# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Resolved location models."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LineColumnRange(BaseModel):
    """1-based line/column coordinates.  ``end_column`` is exclusive."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["line_column"] = "line_column"
    start_line: int
    start_column: int = 1
    end_line: int
    end_column: int | None = None


class CharRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["char"] = "char"
    offset: int
    length: int = 0


class ByteRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["byte"] = "byte"
    offset: int
    length: int = 0


Range = Annotated[LineColumnRange | CharRange | ByteRange, Field(discriminator="kind")]


class ResolvedLocation(BaseModel):
    """A concrete, addressable location.

    ``range`` is ``None`` for whole-file references and for files that could
    not be mapped to the local filesystem (``mapped`` is then ``False``).
    """

    model_config = ConfigDict(frozen=True)

    uri: str
    uri_base_id: str | None = None
    file_path: str | None = None
    range: Range | None = None
    mapped: bool = False
    snippet: str | None = None
    location_id: int | None = None
    message: str | None = None

    @property
    def file_missing(self) -> bool:
        return not self.mapped

    @property
    def file_name(self) -> str:
        return self.uri.rstrip("/").rsplit("/", 1)[-1]

    @property
    def absolute_uri(self) -> str:
        """Document identity: the local file as a ``file:`` uri once mapped, else ``uri``."""
        if self.mapped and self.file_path is not None:
            return Path(self.file_path).absolute().as_uri()
        return self.uri
