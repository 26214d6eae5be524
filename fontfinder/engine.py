"""Font discovery engine.

Limitations:
- Listings are walked one directory at a time, never concurrently
- No symlink cycle detection; the depth limit is the only backstop
- Results are not deduplicated
"""

from __future__ import annotations

import re
from time import perf_counter
from typing import Iterable

from loguru import logger

from fontfinder.config import DEFAULT_SETTINGS, FinderSettings
from fontfinder.filesystem import DirectoryLister, default_lister, resolve_source
from fontfinder.notifications import ReadinessGate, WarningNotifier
from models import ListingResult, ScanReport


def _extension_pattern(extensions: Iterable[str]) -> re.Pattern[str]:
    """Build a case-insensitive pattern matching names ending in extensions."""
    alternatives = "|".join(re.escape(extension) for extension in extensions)
    return re.compile(rf"(?:{alternatives})$", re.IGNORECASE)


def is_font_file(path: str, settings: FinderSettings = DEFAULT_SETTINGS) -> bool:
    """Return True when the last path segment carries a font extension."""
    name = path.split("/")[-1]
    return bool(_extension_pattern(settings.font_extensions).search(name))


def filter_font_files(
    files: Iterable[str],
    settings: FinderSettings = DEFAULT_SETTINGS,
) -> list[str]:
    """Keep font files in listing order, capped per directory."""
    pattern = _extension_pattern(settings.font_extensions)
    fonts = [path for path in files if pattern.search(path.split("/")[-1])]
    return fonts[: settings.max_files_per_directory]


def _is_valid_target(directory: str, listing: ListingResult) -> bool:
    """Check the listing answers for directory itself."""
    return listing.target == directory or directory in listing.files


async def find_font_files(
    directory: str,
    lister: DirectoryLister,
    notifier: WarningNotifier | None = None,
    settings: FinderSettings = DEFAULT_SETTINGS,
    depth: int = 0,
) -> list[str]:
    """Recursively collect font files under directory.

    Args:
        directory: Directory to browse.
        lister: Backend used to list each directory.
        notifier: Receives listing failures and mismatched targets.
        settings: Depth and per-directory limits.
        depth: Current recursion depth.

    Returns:
        Font files of directory followed by those of each subdirectory, in
        listing order. Never raises for listing problems; the affected
        directory contributes nothing.
    """
    if depth >= settings.max_depth:
        return []
    if notifier is None:
        notifier = WarningNotifier(ReadinessGate(ready=True), module_id=settings.module_id)

    source = resolve_source(directory, settings)
    listing = ListingResult(target=directory)
    try:
        listing = await lister.browse(source, directory)
    except Exception as exc:
        logger.debug(f"Listing failed for {directory!r}: {type(exc).__name__}: {exc}")
        notifier.invalid_directory(exc)
    else:
        if not _is_valid_target(directory, listing):
            logger.debug(f"Listing target {listing.target!r} does not match {directory!r}")
            notifier.invalid_target()
            return []

    fonts = filter_font_files(listing.files, settings)

    for subdirectory in listing.dirs:
        if settings.shared_depth:
            depth += 1
            child_depth = depth
        else:
            child_depth = depth + 1
        fonts.extend(
            await find_font_files(
                subdirectory,
                lister,
                notifier=notifier,
                settings=settings,
                depth=child_depth,
            )
        )

    return fonts


async def scan(
    path: str,
    lister: DirectoryLister | None = None,
    settings: FinderSettings = DEFAULT_SETTINGS,
    gate: ReadinessGate | None = None,
) -> ScanReport:
    """Scan a directory tree and return a report with fonts and warnings.

    Warnings raised during the walk are held by the gate and delivered once
    the walk has finished.
    """
    started_at = perf_counter()
    if lister is None:
        lister = default_lister(settings)
    if gate is None:
        gate = ReadinessGate()

    warnings: list[str] = []
    notifier = WarningNotifier(gate, sink=warnings.append, module_id=settings.module_id)

    try:
        fonts = await find_font_files(path, lister, notifier=notifier, settings=settings)
    finally:
        gate.signal_ready()
    duration_ms = int((perf_counter() - started_at) * 1000)

    return ScanReport(
        root=path,
        fonts=tuple(fonts),
        warnings=tuple(warnings),
        duration_ms=duration_ms,
        settings=settings.summary(),
    )
