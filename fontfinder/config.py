"""Settings for font discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass

ASSETS_PREFIX_ENV_VARS = (
    "FONTFINDER_ASSETS_PREFIX",
    "FORGEVTT_ASSETS_LIBRARY_URL_PREFIX",
)


@dataclass(frozen=True)
class FinderSettings:
    """Limits and source configuration for one traversal."""

    max_depth: int = 50
    max_files_per_directory: int = 50
    font_extensions: tuple[str, ...] = (".otf", ".ttf", ".woff", ".woff2")
    assets_prefix: str = ""
    default_source: str = "data"
    remote_source: str = "forgevtt"
    # Advance one depth counter across siblings instead of depth + 1 per branch.
    shared_depth: bool = False
    module_id: str = "font-finder"

    def __post_init__(self) -> None:
        if not self.font_extensions or not all(self.font_extensions):
            raise ValueError("font_extensions must list at least one non-empty extension")

    def summary(self) -> dict[str, object]:
        """Return the settings that are reported with scan output."""
        return {
            "max_depth": self.max_depth,
            "max_files_per_directory": self.max_files_per_directory,
            "shared_depth": self.shared_depth,
        }


DEFAULT_SETTINGS = FinderSettings()


def assets_prefix_from_env(environ: dict[str, str] | None = None) -> str:
    """Return the first non-empty assets prefix found in the environment."""
    env = os.environ if environ is None else environ
    for name in ASSETS_PREFIX_ENV_VARS:
        value = env.get(name, "")
        if value:
            return value
    return ""
