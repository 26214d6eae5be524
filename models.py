"""Data models for directory listings and scan results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListingResult:
    """One directory listing as reported by a listing backend."""

    target: str
    files: tuple[str, ...] = ()
    dirs: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, str | list[str]]:
        """Serialize listing to dictionary output."""
        return {
            "target": self.target,
            "files": list(self.files),
            "dirs": list(self.dirs),
        }


@dataclass(frozen=True)
class ScanReport:
    """Structured result of one font scan."""

    root: str
    fonts: tuple[str, ...]
    warnings: tuple[str, ...] = ()
    duration_ms: int = 0
    settings: dict[str, object] = field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        """Return True when any warning was delivered during the scan."""
        return bool(self.warnings)

    def to_dict(self) -> dict[str, object]:
        """Serialize report to dictionary output."""
        return {
            "summary": {
                "root": self.root,
                "font_count": len(self.fonts),
                "warnings_count": len(self.warnings),
                "duration_ms": self.duration_ms,
                **self.settings,
            },
            "fonts": list(self.fonts),
            "warnings": list(self.warnings),
        }
