# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rebuild SARIF code flows into ordered, filterable step sequences."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from sarifview.core.config import Settings
from sarifview.core.constants import DEFAULT_IMPORTANCE, Importance
from sarifview.formatting.message import format_message
from sarifview.models import sarif
from sarifview.models.location import ResolvedLocation
from sarifview.models.result import CodeFlow, NavigationCommand, Step, ThreadFlow
from sarifview.resolvers.location import LocationResolver

logger = logging.getLogger("sarifview.normalizers.code_flow")


def parse_importance(value: str | None) -> Importance:
    if value is None:
        return DEFAULT_IMPORTANCE
    try:
        return Importance(value)
    except ValueError:
        logger.warning("Unknown step importance %r, using %s", value, DEFAULT_IMPORTANCE)
        return DEFAULT_IMPORTANCE


def _message_text(
    message: sarif.Message | None, message_strings: Mapping[str, str] | None = None
) -> str | None:
    formatted = format_message(message, message_strings=message_strings)
    if formatted is None or not formatted.text:
        return None
    return formatted.text


class CodeFlowNormalizer:
    """Normalizes ``result.codeFlows``.

    Flow, thread and step order is preserved exactly; consumers address
    steps positionally ("step 3 of thread flow 1").
    """

    def __init__(self, resolver: LocationResolver, settings: Settings | None = None) -> None:
        self._resolver = resolver
        self._settings = settings or resolver.settings

    async def normalize(
        self,
        code_flows: Sequence[sarif.CodeFlow] | None,
        uri_base_ids: Mapping[str, str] | None = None,
        message_strings: Mapping[str, str] | None = None,
    ) -> list[CodeFlow]:
        """Normalize *code_flows*; ``messageId`` references resolve against *message_strings*."""
        if not code_flows:
            return []

        flows: list[CodeFlow] = []
        for flow_index, code_flow in enumerate(code_flows):
            threads: list[ThreadFlow] = []
            for thread_index, thread_flow in enumerate(code_flow.threadFlows):
                threads.append(
                    await self._normalize_thread(
                        flow_index, thread_index, thread_flow, uri_base_ids, message_strings
                    )
                )
            message = _message_text(code_flow.message, message_strings)
            flows.append(CodeFlow(message=message, threads=threads))
        return flows

    async def _normalize_thread(
        self,
        flow_index: int,
        thread_index: int,
        thread_flow: sarif.ThreadFlow,
        uri_base_ids: Mapping[str, str] | None,
        message_strings: Mapping[str, str] | None = None,
    ) -> ThreadFlow:
        locations = await self._resolver.resolve_all(
            [tfl.location or sarif.Location() for tfl in thread_flow.locations],
            uri_base_ids,
        )

        last = len(thread_flow.locations) - 1
        steps = [
            self._build_step(
                flow_index, thread_index, step_index, tfl, location, step_index == last, message_strings
            )
            for step_index, (tfl, location) in enumerate(zip(thread_flow.locations, locations, strict=True))
        ]
        return ThreadFlow(
            id=thread_flow.id,
            message=_message_text(thread_flow.message, message_strings),
            steps=steps,
        )

    def _build_step(
        self,
        flow_index: int,
        thread_index: int,
        step_index: int,
        tfl: sarif.ThreadFlowLocation,
        location: ResolvedLocation | None,
        is_last: bool,
        message_strings: Mapping[str, str] | None = None,
    ) -> Step:
        trace_id = f"{flow_index}_{thread_index}_{step_index}"
        step_number = step_index + 1
        message = None
        if tfl.location is not None:
            message = _message_text(tfl.location.message, message_strings)

        if message:
            title = f"[{step_number}] {message}"
        elif location is not None:
            title = f"[{step_number}] {location.file_name}"
        else:
            title = f"[{step_number}]"

        return Step(
            trace_id=trace_id,
            step_number=step_number,
            location=location,
            importance=parse_importance(tfl.importance),
            message=message,
            is_last_in_thread=is_last,
            command=NavigationCommand(
                title=title,
                command=self._settings.step_command,
                arguments=[trace_id],
            ),
            kind=tfl.kind,
            module=tfl.module,
            nesting_level=tfl.nestingLevel,
            execution_order=tfl.executionOrder,
            state=tfl.state,
            timestamp=tfl.timestamp,
        )
