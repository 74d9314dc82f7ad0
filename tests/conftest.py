# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

from sarifview.core.config import Settings
from sarifview.resolvers.location import LocationResolver

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SARIF_DIR = FIXTURES_DIR / "sarif"
SOURCE_ROOT = FIXTURES_DIR / "src"


@pytest.fixture
def sarif_dir() -> Path:
    return SARIF_DIR


@pytest.fixture
def source_root() -> Path:
    return SOURCE_ROOT


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted at an empty temp dir, isolated from the environment."""
    return Settings(source_root=tmp_path, _env_file=None)


@pytest.fixture
def fixture_settings() -> Settings:
    return Settings(source_root=SOURCE_ROOT, _env_file=None)


@pytest.fixture
def resolver(settings: Settings) -> LocationResolver:
    return LocationResolver(settings=settings)


@pytest.fixture
def write_source(tmp_path: Path):
    """Write a source file under the temp source root and return its path."""

    def _write(rel_path: str, content: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
