# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Code-flow step markers for the active result, filtered by verbosity."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from sarifview.core.constants import Importance
from sarifview.models.location import Range, ResolvedLocation
from sarifview.models.result import NavigationCommand, Step
from sarifview.session import SarifSession


@dataclass(frozen=True)
class CodeLens:
    """A marker placed at ``range`` that runs ``command`` when clicked."""

    range: Range | None
    command: NavigationCommand


def step_is_visible(step: Step, verbosity: Importance) -> bool:
    return (
        step.importance == Importance.ESSENTIAL
        or verbosity == Importance.UNIMPORTANT
        or step.importance == verbosity
    )


def normalize_document_uri(document_uri: str) -> str:
    """Canonical ``file:`` uri for local documents; other uris are returned as-is."""
    parsed = urlparse(document_uri)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path)).absolute().as_uri()
    if len(parsed.scheme) <= 1 and Path(document_uri).is_absolute():
        return Path(document_uri).as_uri()
    return document_uri


def location_in_document(location: ResolvedLocation, document_uri: str) -> bool:
    # Relative identifiers still match the uri as written in the log.
    return location.uri == document_uri or location.absolute_uri == normalize_document_uri(document_uri)


class CodeFlowLensProvider:
    """Produces per-document step markers from the session's active result.

    Documents are identified by absolute uri; a step matches when its mapped
    file is that document.  Subscribers registered with :meth:`on_did_change`
    are told to recompute whenever the active result or verbosity changes,
    or when :meth:`trigger_refresh` is called.
    """

    def __init__(self, session: SarifSession) -> None:
        self._session = session

    def provide(self, document_uri: str) -> list[CodeLens]:
        if self._session.active_result is None:
            return []

        verbosity = self._session.verbosity
        return [
            CodeLens(range=step.location.range, command=step.command)
            for step in self._iter_steps()
            if step.location is not None
            and location_in_document(step.location, document_uri)
            and step_is_visible(step, verbosity)
        ]

    def on_did_change(self, listener: Callable[[], None]) -> Callable[[], None]:
        return self._session.subscribe(listener)

    def trigger_refresh(self) -> None:
        self._session.notify()

    def _iter_steps(self) -> Iterator[Step]:
        result = self._session.active_result
        if result is None:
            return
        for code_flow in result.code_flows:
            for thread in code_flow.threads:
                yield from thread.steps
