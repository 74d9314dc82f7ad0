# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Presentation adapters over a loaded session."""

from sarifview.presentation.code_flow_lens import CodeFlowLensProvider, CodeLens, step_is_visible

__all__ = [
    "CodeFlowLensProvider",
    "CodeLens",
    "step_is_visible",
]
