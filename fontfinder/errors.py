"""Exceptions raised by font discovery."""

from __future__ import annotations


class FontFinderError(Exception):
    """Base class for font discovery errors."""


class ListingError(FontFinderError):
    """A directory could not be listed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
