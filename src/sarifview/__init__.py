# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifview - normalize SARIF logs into a display-ready result model."""

__version__ = "0.1.0"

from sarifview.core.exceptions import (
    MalformedLogError,
    ParseError,
    SarifViewError,
    UnsupportedVersionError,
)
from sarifview.sdk import load_log, load_log_file, load_log_file_sync, load_log_sync
from sarifview.session import SarifSession

__all__ = [
    "MalformedLogError",
    "ParseError",
    "SarifSession",
    "SarifViewError",
    "UnsupportedVersionError",
    "__version__",
    "load_log",
    "load_log_file",
    "load_log_file_sync",
    "load_log_sync",
]
