# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding sarifview in other tools.

Usage::

    from sarifview import load_log_file_sync

    session = load_log_file_sync("results.sarif")
    for result in session.results:
        print(result.severity_level, result.message.text)

    # Async
    session = await load_log(data, sarif_file_name="results.sarif")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sarifview.core.config import Settings, get_settings
from sarifview.normalizers.log import LogLoader
from sarifview.parsers.log_parser import parse_log_file
from sarifview.session import SarifSession

logger = logging.getLogger("sarifview.sdk")


# ---------------------------------------------------------------------------
# Public async API
# ---------------------------------------------------------------------------


async def load_log(
    data: Mapping[str, Any],
    *,
    sarif_file_name: str = "<memory>",
    first_run_id: int = 0,
    settings: Settings | None = None,
) -> SarifSession:
    """Normalize an already-deserialized SARIF log.

    Parameters
    ----------
    data:
        The decoded JSON object of a SARIF 2.0.0 log.
    sarif_file_name:
        Origin identifier stored on every ``RunInfo``.
    first_run_id:
        Id assigned to the first run; later runs count up from it.
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.

    Returns
    -------
    SarifSession
        A new session holding every run and result in log order.
    """
    loader = LogLoader(settings=settings or get_settings())
    return await loader.load(data, sarif_file_name, first_run_id=first_run_id)


async def load_log_file(
    path: str | Path,
    *,
    first_run_id: int = 0,
    settings: Settings | None = None,
) -> SarifSession:
    """Read a ``.sarif`` file from disk and normalize it.

    The resolved file path is used as the origin identifier.
    """
    resolved = str(Path(path).resolve())
    log = await parse_log_file(resolved)
    loader = LogLoader(settings=settings or get_settings())
    return await loader.load(log, resolved, first_run_id=first_run_id)


# ---------------------------------------------------------------------------
# Public sync wrappers
# ---------------------------------------------------------------------------


def load_log_sync(
    data: Mapping[str, Any],
    *,
    sarif_file_name: str = "<memory>",
    first_run_id: int = 0,
    settings: Settings | None = None,
) -> SarifSession:
    """Synchronous wrapper around :func:`load_log`.

    Calls ``asyncio.run()`` internally, so it must **not** be called from
    within an already-running event loop.
    """
    return asyncio.run(
        load_log(
            data,
            sarif_file_name=sarif_file_name,
            first_run_id=first_run_id,
            settings=settings,
        )
    )


def load_log_file_sync(
    path: str | Path,
    *,
    first_run_id: int = 0,
    settings: Settings | None = None,
) -> SarifSession:
    """Synchronous wrapper around :func:`load_log_file`."""
    return asyncio.run(load_log_file(path, first_run_id=first_run_id, settings=settings))
