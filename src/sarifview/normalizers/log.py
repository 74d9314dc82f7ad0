# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Load a whole SARIF log into a :class:`SarifSession`."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from sarifview.core.config import Settings, get_settings
from sarifview.models import sarif
from sarifview.normalizers.result import ResultNormalizer
from sarifview.normalizers.run import normalize_run
from sarifview.parsers.log_parser import parse_log_data
from sarifview.resolvers.location import LocationResolver, gather_ordered
from sarifview.session import SarifSession

logger = logging.getLogger("sarifview.normalizers.log")


class LogLoader:
    """Drives the run and result normalizers over every run of a log.

    Run ids are assigned sequentially from ``first_run_id``.  Each load uses
    a fresh :class:`LocationResolver`, so cached file text never outlives it.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    async def load(
        self,
        log: sarif.SarifLog | Mapping[str, Any],
        sarif_file_name: str,
        *,
        first_run_id: int = 0,
        session: SarifSession | None = None,
    ) -> SarifSession:
        if not isinstance(log, sarif.SarifLog):
            log = parse_log_data(log, file_path=sarif_file_name)

        session = session or SarifSession(settings=self._settings)
        resolver = LocationResolver(settings=self._settings)
        normalizer = ResultNormalizer(resolver, settings=self._settings)

        start_time = time.monotonic()
        total = 0
        for offset, run in enumerate(log.runs):
            run_id = first_run_id + offset
            run_info = normalize_run(run, run_id, sarif_file_name)
            results = await gather_ordered(
                normalizer.normalize(result, run_id, run.resources, run_info.uri_base_ids)
                for result in run.results or []
            )
            session.add_run(run_info, results)
            total += len(results)
            logger.debug(
                "Run %d (%s): %d results", run_id, run_info.tool_full_name, len(results)
            )

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "Loaded %s: runs=%d results=%d duration=%dms",
            sarif_file_name,
            len(log.runs),
            total,
            elapsed_ms,
            extra={"sarif_file": sarif_file_name},
        )
        return session
