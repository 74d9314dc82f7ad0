# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Resolve SARIF file references and regions into concrete locations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import TypeVar
from urllib.parse import urlparse
from urllib.request import url2pathname

import aiofiles
import aiofiles.os

from sarifview.core.config import Settings, get_settings
from sarifview.models import sarif
from sarifview.models.location import ByteRange, CharRange, LineColumnRange, ResolvedLocation

logger = logging.getLogger("sarifview.resolvers.location")

T = TypeVar("T")


async def gather_ordered(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Await all *aws* concurrently and return results in submission order."""
    return list(await asyncio.gather(*aws))


def resolve_uri(file_location: sarif.FileLocation, uri_base_ids: Mapping[str, str] | None) -> str:
    """Apply the run's base-id table to *file_location*.

    An absolute uri is used as-is even when a base id is present; an unknown
    base id leaves the relative uri untouched.
    """
    uri = file_location.uri
    base_id = file_location.uriBaseId
    if base_id is None or _has_scheme(uri):
        return uri

    prefix = (uri_base_ids or {}).get(base_id)
    if prefix is None:
        logger.debug("Unknown uriBaseId %r for %s, keeping relative uri", base_id, uri)
        return uri
    return prefix.rstrip("/") + "/" + uri.lstrip("/")


def region_to_range(region: sarif.Region | None) -> LineColumnRange | CharRange | ByteRange | None:
    """Pick exactly one coordinate system: line/column, then chars, then bytes."""
    if region is None:
        return None
    if region.startLine is not None:
        return LineColumnRange(
            start_line=region.startLine,
            start_column=region.startColumn or 1,
            end_line=max(region.endLine or region.startLine, region.startLine),
            end_column=region.endColumn,
        )
    if region.charOffset is not None:
        return CharRange(offset=region.charOffset, length=region.charLength or 0)
    if region.byteOffset is not None:
        return ByteRange(offset=region.byteOffset, length=region.byteLength or 0)
    return None


def _has_scheme(uri: str) -> bool:
    # Single-letter schemes are Windows drive letters, not uri schemes.
    return len(urlparse(uri).scheme) > 1


class LocationResolver:
    """Turns file references into :class:`ResolvedLocation` objects.

    File existence checks and snippet extraction suspend on disk access.
    File access is bounded by ``Settings.resolve_concurrency`` and file bytes
    are cached for the lifetime of the resolver, which is one log load.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._semaphore: asyncio.Semaphore | None = None
        self._content_cache: dict[Path, bytes | None] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    async def resolve(
        self,
        file_location: sarif.FileLocation,
        region: sarif.Region | None = None,
        uri_base_ids: Mapping[str, str] | None = None,
        *,
        location_id: int | None = None,
        message: str | None = None,
    ) -> ResolvedLocation:
        uri = resolve_uri(file_location, uri_base_ids)
        path = self._uri_to_path(uri)

        unmapped = ResolvedLocation(
            uri=uri,
            uri_base_id=file_location.uriBaseId,
            mapped=False,
            location_id=location_id,
            message=message,
        )
        if path is None or not await self._is_file(path):
            logger.debug("File for %s is not available locally", uri)
            return unmapped

        rng = region_to_range(region)
        snippet: str | None = None
        if region is not None and region.snippet is not None and region.snippet.text is not None:
            snippet = region.snippet.text
        elif rng is not None and self._settings.read_snippets:
            content = await self._read_bytes(path)
            if content is None:
                return unmapped
            snippet = self._extract_snippet(content, rng)

        return ResolvedLocation(
            uri=uri,
            uri_base_id=file_location.uriBaseId,
            file_path=str(path),
            range=rng,
            mapped=True,
            snippet=snippet,
            location_id=location_id,
            message=message,
        )

    async def resolve_physical(
        self,
        physical: sarif.PhysicalLocation,
        uri_base_ids: Mapping[str, str] | None = None,
        *,
        message: str | None = None,
    ) -> ResolvedLocation:
        return await self.resolve(
            physical.fileLocation,
            physical.region,
            uri_base_ids,
            location_id=physical.id,
            message=message,
        )

    async def resolve_location(
        self,
        location: sarif.Location | None,
        uri_base_ids: Mapping[str, str] | None = None,
    ) -> ResolvedLocation | None:
        """Resolve a schema ``Location``; ``None`` when it has no physical part."""
        if location is None or location.physicalLocation is None:
            return None
        message = location.message.text if location.message is not None else None
        return await self.resolve_physical(location.physicalLocation, uri_base_ids, message=message)

    async def resolve_all(
        self,
        locations: Sequence[sarif.Location],
        uri_base_ids: Mapping[str, str] | None = None,
    ) -> list[ResolvedLocation | None]:
        """Resolve *locations* concurrently, preserving their order."""
        return await gather_ordered(
            self.resolve_location(loc, uri_base_ids) for loc in locations
        )

    # ------------------------------------------------------------------
    # Filesystem access
    # ------------------------------------------------------------------

    def _uri_to_path(self, uri: str) -> Path | None:
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            return Path(url2pathname(parsed.path))
        if len(parsed.scheme) > 1:
            return None
        path = Path(uri) if parsed.scheme else Path(url2pathname(parsed.path))
        if path.is_absolute():
            return path
        return self._settings.source_root / path

    def _get_semaphore(self) -> asyncio.Semaphore:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._settings.resolve_concurrency)
        return self._semaphore

    async def _is_file(self, path: Path) -> bool:
        async with self._get_semaphore():
            try:
                return await aiofiles.os.path.isfile(path)
            except OSError as exc:
                logger.debug("Cannot stat %s: %s", path, exc)
                return False

    async def _read_bytes(self, path: Path) -> bytes | None:
        if path in self._content_cache:
            return self._content_cache[path]

        async with self._get_semaphore():
            try:
                async with aiofiles.open(path, "rb") as fh:
                    content: bytes | None = await fh.read()
            except OSError as exc:
                logger.debug("Cannot read %s: %s", path, exc)
                content = None

        self._content_cache[path] = content
        return content

    def _extract_snippet(self, content: bytes, rng: LineColumnRange | CharRange | ByteRange) -> str | None:
        encoding = self._settings.file_encoding
        if isinstance(rng, ByteRange):
            snippet = content[rng.offset : rng.offset + rng.length].decode(encoding, errors="replace")
        else:
            # Offsets count the file as written, so line endings are not translated.
            text = content.decode(encoding, errors="replace")
            if isinstance(rng, CharRange):
                snippet = text[rng.offset : rng.offset + rng.length]
            else:
                snippet = _slice_lines(text, rng)

        if not snippet:
            return None
        return snippet[: self._settings.max_snippet_chars]


def _slice_lines(text: str, rng: LineColumnRange) -> str | None:
    lines = text.splitlines()
    if rng.start_line < 1 or rng.start_line > len(lines):
        return None
    chunk = lines[rng.start_line - 1 : rng.end_line]
    if not chunk:
        return None
    # Trim the tail first so end_column still indexes the original line.
    if rng.end_column is not None:
        chunk[-1] = chunk[-1][: rng.end_column - 1]
    chunk[0] = chunk[0][rng.start_column - 1 :]
    return "\n".join(chunk)
