# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Turn SARIF message records into display text with resolved links."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from sarifview.models import sarif
from sarifview.models.location import ResolvedLocation
from sarifview.models.message import FormattedMessage, LinkSpan, TextSpan

logger = logging.getLogger("sarifview.formatting.message")

# ---------------------------------------------------------------------------
# Placeholders
# ---------------------------------------------------------------------------

# Matches {{, }} and positional placeholders such as {0}
_PLACEHOLDER_RE = re.compile(r"\{\{|\}\}|\{(\d+)\}")


def substitute_arguments(template: str, arguments: Sequence[str]) -> str:
    """Replace ``{N}`` with ``arguments[N]``; out-of-range placeholders stay verbatim."""

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        index = int(match.group(1))
        if index < len(arguments):
            return arguments[index]
        return token

    return _PLACEHOLDER_RE.sub(_replace, template)


# ---------------------------------------------------------------------------
# Embedded links
# ---------------------------------------------------------------------------

# Matches [label](N) where the label may contain escaped brackets
_LINK_RE = re.compile(r"(?<!\\)\[((?:\\.|[^\[\]\\])*)\]\((\d+)\)")
_ESCAPE_RE = re.compile(r"\\([\[\]])")


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(r"\1", text)


def _find_target(
    index: int, locations: Sequence[ResolvedLocation | None]
) -> ResolvedLocation | None:
    """Match a link target by physical location id first, then by position."""
    for loc in locations:
        if loc is not None and loc.location_id == index:
            return loc
    if index < len(locations):
        return locations[index]
    return None


def parse_links(
    text: str, locations: Sequence[ResolvedLocation | None] = ()
) -> FormattedMessage:
    spans: list[TextSpan | LinkSpan] = []
    pending = ""
    pos = 0

    for match in _LINK_RE.finditer(text):
        pending += _unescape(text[pos : match.start()])
        label = _unescape(match.group(1))
        index = int(match.group(2))
        target = _find_target(index, locations)
        if target is None:
            logger.debug("Unresolved message link %r -> %d", label, index)
            pending += _unescape(match.group(0))
        else:
            if pending:
                spans.append(TextSpan(text=pending))
                pending = ""
            spans.append(LinkSpan(text=label, target_index=index, location=target))
        pos = match.end()

    pending += _unescape(text[pos:])
    if pending:
        spans.append(TextSpan(text=pending))

    return FormattedMessage(text="".join(s.text for s in spans), spans=spans)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_message(
    message: sarif.Message | None,
    locations: Sequence[ResolvedLocation | None] = (),
    message_strings: Mapping[str, str] | None = None,
) -> FormattedMessage | None:
    """Format *message* for display.

    ``text`` wins over ``messageId``; a ``messageId`` is looked up in
    *message_strings*.  Positional arguments are substituted when the message
    carries any.  ``[label](N)`` references are resolved against *locations*.
    Returns ``None`` when *message* is ``None``.
    """
    if message is None:
        return None

    template = message.text
    if template is None and message.messageId is not None:
        template = (message_strings or {}).get(message.messageId)
        if template is None:
            logger.debug("messageId %r not found in string table", message.messageId)
    if template is None:
        return FormattedMessage()

    if message.arguments:
        template = substitute_arguments(template, message.arguments)

    return parse_links(template, locations)
