# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-load session holding the normalized model and the viewer selection.

A session is created when a log is loaded, replaced wholesale by the next
load and torn down with :meth:`SarifSession.close`.  Runs and results are
immutable once added; only the selection (active result, verbosity) changes,
and every change is announced to subscribers.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable

from sarifview.core.config import Settings, get_settings
from sarifview.core.constants import Importance
from sarifview.models.result import ResultInfo
from sarifview.models.run import RunInfo

logger = logging.getLogger("sarifview.session")

ChangeListener = Callable[[], None]


class SarifSession:
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._runs: list[RunInfo] = []
        self._results: list[ResultInfo] = []
        self._active_result: ResultInfo | None = None
        self._verbosity: Importance = self._settings.default_verbosity
        self._listeners: list[ChangeListener] = []
        self._closed = False

    # ------------------------------------------------------------------
    # Loaded model
    # ------------------------------------------------------------------

    @property
    def runs(self) -> list[RunInfo]:
        return list(self._runs)

    @property
    def results(self) -> list[ResultInfo]:
        return list(self._results)

    def add_run(self, run: RunInfo, results: list[ResultInfo]) -> None:
        self._ensure_open()
        if any(r.run_id == run.run_id for r in self._runs):
            raise ValueError(f"Duplicate run id {run.run_id}")
        self._runs.append(run)
        self._results.extend(results)

    def get_run(self, run_id: int) -> RunInfo | None:
        for run in self._runs:
            if run.run_id == run_id:
                return run
        return None

    def results_for_run(self, run_id: int) -> list[ResultInfo]:
        return [r for r in self._results if r.run_id == run_id]

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def active_result(self) -> ResultInfo | None:
        return self._active_result

    def set_active_result(self, result: ResultInfo | None) -> None:
        self._ensure_open()
        self._active_result = result
        self.notify()

    @property
    def verbosity(self) -> Importance:
        return self._verbosity

    def set_verbosity(self, verbosity: Importance | str) -> None:
        self._ensure_open()
        self._verbosity = Importance(verbosity)
        self.notify()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return _unsubscribe

    def notify(self) -> None:
        """Invoke every listener.  A failing listener does not stop the others."""
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Session listener %s raised an exception", listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._listeners.clear()
        self._active_result = None
        self._runs.clear()
        self._results.clear()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Session is closed")
