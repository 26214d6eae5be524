"""Bounded recursive font file discovery."""

from fontfinder.engine import filter_font_files, find_font_files, is_font_file, scan

__all__ = ["filter_font_files", "find_font_files", "is_font_file", "scan"]
