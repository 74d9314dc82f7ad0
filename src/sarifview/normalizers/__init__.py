# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalizers turning SARIF records into the display model."""

from sarifview.normalizers.code_flow import CodeFlowNormalizer
from sarifview.normalizers.log import LogLoader
from sarifview.normalizers.result import ResultNormalizer
from sarifview.normalizers.run import normalize_run, tool_full_name

__all__ = [
    "CodeFlowNormalizer",
    "LogLoader",
    "ResultNormalizer",
    "normalize_run",
    "tool_full_name",
]
