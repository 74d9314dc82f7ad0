# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF log parsing utilities."""

from sarifview.parsers.log_parser import parse_log_content, parse_log_data, parse_log_file

__all__ = [
    "parse_log_content",
    "parse_log_data",
    "parse_log_file",
]
