"""Directory listing backends and source selection."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from loguru import logger

from fontfinder.config import DEFAULT_SETTINGS, FinderSettings
from fontfinder.errors import ListingError
from models import ListingResult


class DirectoryLister(Protocol):
    """Anything able to list one directory of a named source."""

    async def browse(self, source: str, path: str) -> ListingResult: ...


def resolve_source(directory: str, settings: FinderSettings = DEFAULT_SETTINGS) -> str:
    """Pick the source that should service a listing of directory."""
    if settings.assets_prefix and directory.startswith(settings.assets_prefix):
        return settings.remote_source
    return settings.default_source


def _join(parent: str, name: str) -> str:
    """Join a listing path and an entry name with a forward slash."""
    if parent.endswith("/"):
        return f"{parent}{name}"
    return f"{parent}/{name}"


def _read_directory(path: str) -> ListingResult:
    """Blocking read of one local directory level.

    Args:
        path: Directory (or file) to list.

    Returns:
        Listing with entries sorted by name. A file path is reported as a
        listing of its parent that contains only that file.

    Raises:
        ListingError: If the path does not exist or cannot be read.
    """
    location = Path(path)
    try:
        if not location.exists():
            raise ListingError(f"Directory does not exist: {path}", path=path)
        if location.is_file():
            return ListingResult(target=location.parent.as_posix(), files=(path,))

        files: list[str] = []
        dirs: list[str] = []
        for entry in sorted(location.iterdir(), key=lambda entry: entry.name):
            if entry.is_dir():
                dirs.append(_join(path, entry.name))
            elif entry.is_file():
                files.append(_join(path, entry.name))
    except OSError as exc:
        raise ListingError(f"Cannot read directory {path}: {exc}", path=path) from exc

    return ListingResult(target=path, files=tuple(files), dirs=tuple(dirs))


class LocalDirectoryLister:
    """Lists directories of the local filesystem."""

    async def browse(self, source: str, path: str) -> ListingResult:
        logger.debug(f"Listing {source}:{path}")
        return await asyncio.to_thread(_read_directory, path)


class SourceRouter:
    """Dispatches listings to the lister registered for each source."""

    def __init__(self, listers: dict[str, DirectoryLister] | None = None) -> None:
        self._listers: dict[str, DirectoryLister] = dict(listers or {})

    def register(self, source: str, lister: DirectoryLister) -> None:
        """Register or replace the lister for source."""
        self._listers[source] = lister

    @property
    def sources(self) -> list[str]:
        return sorted(self._listers)

    async def browse(self, source: str, path: str) -> ListingResult:
        lister = self._listers.get(source)
        if lister is None:
            raise ListingError(f"No listing backend for source '{source}'", path=path)
        return await lister.browse(source, path)


def default_lister(settings: FinderSettings = DEFAULT_SETTINGS) -> SourceRouter:
    """Return a router serving the default source from the local filesystem."""
    return SourceRouter({settings.default_source: LocalDirectoryLister()})
