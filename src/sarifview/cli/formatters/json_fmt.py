# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from sarifview.presentation.code_flow_lens import CodeLens
from sarifview.session import SarifSession


def format_json(session: SarifSession) -> str:
    """Return the normalized runs and results as a formatted JSON string."""
    data = {
        "runs": [run.model_dump(mode="json") for run in session.runs],
        "results": [result.model_dump(mode="json") for result in session.results],
    }
    return json.dumps(data, indent=2)


def format_json_steps(lenses: list[CodeLens]) -> str:
    data = [
        {
            "range": lens.range.model_dump(mode="json") if lens.range is not None else None,
            "command": lens.command.model_dump(mode="json"),
        }
        for lens in lenses
    ]
    return json.dumps(data, indent=2)
