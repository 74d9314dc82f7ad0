# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging with redaction of secrets found in command lines."""

import json
import logging
import re
import sys
from typing import Any

# Invocation command lines, environment dumps and base uris in SARIF logs
# regularly carry the credentials a scanner was started with.
REDACT_PATTERNS = [
    # CI forge tokens
    re.compile(r"(gh[opsur]_[A-Za-z0-9]{4})[A-Za-z0-9_]{32,}"),
    re.compile(r"(github_pat_[A-Za-z0-9]{4})[A-Za-z0-9_]{40,}"),
    re.compile(r"(glpat-[A-Za-z0-9]{4})[A-Za-z0-9_\-]{16,}"),
    re.compile(r"(AKIA[A-Z0-9]{4})[A-Z0-9]{12}"),
    # Authorization headers passed to uploaders
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{10})[a-zA-Z0-9\-._~+/]*"),
    re.compile(r"(Authorization:\s*(?:token|Basic)\s+\S{2})\S*", re.IGNORECASE),
    # Credentials embedded in repository and base uris
    re.compile(r"(\b[a-zA-Z][a-zA-Z0-9+.\-]*://[^/\s:@]+:)[^@\s/]+(?=@)"),
    re.compile(r"([?&](?:token|access_token|api_key|apikey|password|sig)=)[^&\s#]+"),
    # Scanner flags and environment assignments
    re.compile(r"((?:--token|--password|--api-key|--access-token|--auth-token)[=\s]+\S{2})\S*"),
    re.compile(r"(\b[A-Z][A-Z0-9_]*(?:TOKEN|SECRET|PASSWORD|API_KEY)=)\S+"),
]


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        if hasattr(record, "sarif_file"):
            log_entry["sarif_file"] = record.sarif_file
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(str(record.exc_info[1]))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        return redact_sensitive(msg)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger("sarifview")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
