# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Flatten a SARIF result into :class:`ResultInfo`.

Precedence rules applied here:

* severity: ``result.level`` -> rule ``configuration.defaultLevel`` -> ``warning``
* message:  ``result.message.text`` -> rule message string for
  ``result.ruleMessageId`` -> ``result.message.messageId`` looked up in the
  rule's, then the resources' string table -> ``"No Message Provided"``

Missing optional data never raises; every absence has a default.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from sarifview.core.config import Settings
from sarifview.core.constants import DEFAULT_LEVEL, DEFAULT_LEVEL_MAP, DEFAULT_MESSAGE, Level
from sarifview.formatting.message import format_message
from sarifview.models import sarif
from sarifview.models.location import ResolvedLocation
from sarifview.models.message import FormattedMessage
from sarifview.models.result import Attachment, ResultInfo
from sarifview.normalizers.code_flow import CodeFlowNormalizer
from sarifview.resolvers.location import LocationResolver, gather_ordered

logger = logging.getLogger("sarifview.normalizers.result")


@dataclass
class RuleBinding:
    """Rule metadata adopted by a result; all fields optional."""

    rule: sarif.Rule | None = None
    rule_id: str | None = None
    rule_name: str | None = None
    help_uri: str | None = None
    description: FormattedMessage | None = None
    severity_level: Level | None = None
    message_string: str | None = None


def convert_default_level(default_level: str | None) -> Level:
    """Map a rule's ``defaultLevel``; unmapped values become ``warning``."""
    if default_level is None:
        return DEFAULT_LEVEL
    return DEFAULT_LEVEL_MAP.get(default_level, DEFAULT_LEVEL)


def find_rule(result: sarif.Result, resources: sarif.Resources | None) -> sarif.Rule | None:
    if result.ruleId is None or resources is None or not resources.rules:
        return None
    rule = resources.rules.get(result.ruleId)
    if rule is None:
        logger.debug("Rule %r not found in resources", result.ruleId)
    return rule


def string_table(resources: sarif.Resources | None, rule: sarif.Rule | None) -> dict[str, str]:
    """The rule's ``messageStrings`` layered over the resources' table."""
    table: dict[str, str] = {}
    if resources is not None and resources.messageStrings:
        table.update(resources.messageStrings)
    if rule is not None and rule.messageStrings:
        table.update(rule.messageStrings)
    return table


def bind_rule(
    result: sarif.Result,
    resources: sarif.Resources | None,
    candidates: Sequence[ResolvedLocation | None],
) -> RuleBinding:
    binding = RuleBinding(rule_id=result.ruleId)
    rule = find_rule(result, resources)
    if rule is None:
        return binding
    strings = string_table(resources, rule)

    binding.rule = rule
    if rule.id is not None:
        binding.rule_id = rule.id
    binding.help_uri = rule.helpUri

    name = format_message(rule.name, message_strings=strings)
    if name is not None:
        binding.rule_name = name.text

    if rule.configuration is not None and rule.configuration.defaultLevel is not None:
        binding.severity_level = convert_default_level(rule.configuration.defaultLevel)

    binding.description = format_message(
        rule.fullDescription or rule.shortDescription, candidates, message_strings=strings
    )

    if result.ruleMessageId is not None and rule.messageStrings:
        binding.message_string = rule.messageStrings.get(result.ruleMessageId)

    return binding


def resolve_severity(level: str | None, rule_level: Level | None) -> Level:
    if level is not None:
        try:
            return Level(level)
        except ValueError:
            logger.warning("Ignoring unknown result level %r", level)
    return rule_level or DEFAULT_LEVEL


def select_message(
    result: sarif.Result,
    binding: RuleBinding,
    resources: sarif.Resources | None,
) -> sarif.Message:
    """Pick the message text to format; the result itself is left untouched."""
    original = result.message or sarif.Message()

    text = original.text
    if text is None:
        text = binding.message_string
    if text is None and original.messageId is not None:
        for table in (
            binding.rule.messageStrings if binding.rule is not None else None,
            resources.messageStrings if resources is not None else None,
        ):
            if table and original.messageId in table:
                text = table[original.messageId]
                break
    if text is None:
        text = DEFAULT_MESSAGE

    return sarif.Message(text=text, arguments=original.arguments)


class ResultNormalizer:
    """Builds :class:`ResultInfo` objects for one log load."""

    def __init__(self, resolver: LocationResolver, settings: Settings | None = None) -> None:
        self._resolver = resolver
        self._code_flows = CodeFlowNormalizer(resolver, settings)

    async def normalize(
        self,
        result: sarif.Result,
        run_id: int,
        resources: sarif.Resources | None = None,
        uri_base_ids: Mapping[str, str] | None = None,
    ) -> ResultInfo:
        strings = string_table(resources, find_rule(result, resources))
        locations, related, attachments, code_flows = await asyncio.gather(
            self.parse_locations(result.locations, uri_base_ids),
            self.parse_locations(result.relatedLocations, uri_base_ids),
            self.parse_attachments(result.attachments, uri_base_ids, strings),
            self._code_flows.normalize(result.codeFlows, uri_base_ids, strings),
        )
        if not locations:
            locations = [None]

        candidates = [*locations, *related]
        binding = bind_rule(result, resources, candidates)
        severity = resolve_severity(result.level, binding.severity_level)
        message = format_message(select_message(result, binding, resources), candidates)

        return ResultInfo(
            run_id=run_id,
            locations=locations,
            related_locs=related,
            attachments=attachments or None,
            code_flows=code_flows,
            rule_id=binding.rule_id,
            rule_name=binding.rule_name,
            rule_help_uri=binding.help_uri,
            rule_description=binding.description,
            severity_level=severity,
            message=message or FormattedMessage(text=DEFAULT_MESSAGE),
            additional_properties=result.properties,
        )

    async def parse_locations(
        self,
        sarif_locations: Sequence[sarif.Location] | None,
        uri_base_ids: Mapping[str, str] | None,
    ) -> list[ResolvedLocation | None]:
        """Resolve *sarif_locations*; an absent list becomes ``[None]``."""
        if sarif_locations is None:
            return [None]
        return await self._resolver.resolve_all(sarif_locations, uri_base_ids)

    async def parse_attachments(
        self,
        sarif_attachments: Sequence[sarif.Attachment] | None,
        uri_base_ids: Mapping[str, str] | None,
        message_strings: Mapping[str, str] | None = None,
    ) -> list[Attachment]:
        if not sarif_attachments:
            return []
        return await gather_ordered(
            self._parse_attachment(attachment, uri_base_ids, message_strings)
            for attachment in sarif_attachments
        )

    async def _parse_attachment(
        self,
        sarif_attachment: sarif.Attachment,
        uri_base_ids: Mapping[str, str] | None,
        message_strings: Mapping[str, str] | None = None,
    ) -> Attachment:
        file_location = sarif_attachment.fileLocation
        file = await self._resolver.resolve(file_location, None, uri_base_ids)

        regions: list[ResolvedLocation] | None = None
        if sarif_attachment.regions is not None:
            regions = await gather_ordered(
                self._resolver.resolve(file_location, region, uri_base_ids)
                for region in sarif_attachment.regions
            )

        return Attachment(
            description=format_message(sarif_attachment.description, message_strings=message_strings),
            file=file,
            regions_of_interest=regions,
        )
