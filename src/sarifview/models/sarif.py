# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.0.0 input models.

Only the fields consumed by the normalizers are declared; everything else in
the log is ignored.  Field names follow the JSON schema verbatim.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Message(BaseModel):
    text: str | None = None
    messageId: str | None = None
    richText: str | None = None
    richMessageId: str | None = None
    arguments: list[str] | None = None


class FileContent(BaseModel):
    text: str | None = None
    binary: str | None = None


class FileLocation(BaseModel):
    uri: str
    uriBaseId: str | None = None


class Region(BaseModel):
    startLine: int | None = None
    startColumn: int | None = None
    endLine: int | None = None
    endColumn: int | None = None
    charOffset: int | None = None
    charLength: int | None = None
    byteOffset: int | None = None
    byteLength: int | None = None
    snippet: FileContent | None = None
    message: Message | None = None


class PhysicalLocation(BaseModel):
    id: int | None = None
    fileLocation: FileLocation
    region: Region | None = None
    contextRegion: Region | None = None


class Location(BaseModel):
    physicalLocation: PhysicalLocation | None = None
    fullyQualifiedLogicalName: str | None = None
    message: Message | None = None
    properties: dict[str, Any] | None = None


class ThreadFlowLocation(BaseModel):
    step: int | None = None
    location: Location | None = None
    kind: str | None = None
    module: str | None = None
    state: dict[str, Any] | None = None
    nestingLevel: int | None = None
    executionOrder: int | None = None
    timestamp: str | None = None
    importance: str | None = None
    properties: dict[str, Any] | None = None


class ThreadFlow(BaseModel):
    id: str | None = None
    message: Message | None = None
    locations: list[ThreadFlowLocation] = Field(default_factory=list)


class CodeFlow(BaseModel):
    message: Message | None = None
    threadFlows: list[ThreadFlow] = Field(default_factory=list)


class Attachment(BaseModel):
    description: Message | None = None
    fileLocation: FileLocation
    regions: list[Region] | None = None


class RuleConfiguration(BaseModel):
    enabled: bool | None = None
    defaultLevel: str | None = None
    parameters: dict[str, Any] | None = None


class Rule(BaseModel):
    id: str | None = None
    name: Message | None = None
    shortDescription: Message | None = None
    fullDescription: Message | None = None
    messageStrings: dict[str, str] | None = None
    configuration: RuleConfiguration | None = None
    helpUri: str | None = None
    help: Message | None = None
    properties: dict[str, Any] | None = None


class Resources(BaseModel):
    messageStrings: dict[str, str] | None = None
    rules: dict[str, Rule] | None = None


class Result(BaseModel):
    ruleId: str | None = None
    level: str | None = None
    message: Message | None = None
    ruleMessageId: str | None = None
    locations: list[Location] | None = None
    relatedLocations: list[Location] | None = None
    codeFlows: list[CodeFlow] | None = None
    attachments: list[Attachment] | None = None
    properties: dict[str, Any] | None = None


class Invocation(BaseModel):
    commandLine: str | None = None
    arguments: list[str] | None = None
    executableLocation: FileLocation | None = None
    workingDirectory: str | None = None
    properties: dict[str, Any] | None = None


class Tool(BaseModel):
    name: str
    fullName: str | None = None
    version: str | None = None
    semanticVersion: str | None = None
    language: str | None = None
    properties: dict[str, Any] | None = None


class Run(BaseModel):
    tool: Tool
    invocations: list[Invocation] | None = None
    originalUriBaseIds: dict[str, str] | None = None
    results: list[Result] | None = None
    resources: Resources | None = None
    properties: dict[str, Any] | None = None


class SarifLog(BaseModel):
    version: str
    runs: list[Run] = Field(default_factory=list)
