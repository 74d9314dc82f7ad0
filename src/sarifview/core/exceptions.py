# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifview."""


class SarifViewError(Exception):
    """Base exception for all sarifview errors."""


class ConfigurationError(SarifViewError):
    """Invalid or missing configuration."""


class ParseError(SarifViewError):
    """Failed to read or decode a SARIF log."""


class MalformedLogError(ParseError):
    """The log violates the input contract (e.g. a run without a tool name)."""


class UnsupportedVersionError(ParseError):
    """The log declares a SARIF version this package does not consume."""

    def __init__(self, version: str | None) -> None:
        self.version = version
        super().__init__(f"Unsupported SARIF version: {version!r}")
