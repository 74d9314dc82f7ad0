# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Message formatting utilities."""

from sarifview.formatting.message import format_message, parse_links, substitute_arguments

__all__ = [
    "format_message",
    "parse_links",
    "substitute_arguments",
]
