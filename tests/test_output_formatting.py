"""Tests for JSON/table output formatting."""

import asyncio
import json
import sys
from pathlib import Path

import pytest

import main as cli_main
from fontfinder.engine import scan


def test_json_formatting_from_scan_contains_fonts(tmp_path: Path) -> None:
    """Verify JSON formatting preserves the discovered font paths."""
    (tmp_path / "sample.otf").write_bytes(b"")

    report = asyncio.run(scan(tmp_path.as_posix()))
    rendered = cli_main.format_json_output(report.to_dict())
    payload = json.loads(rendered)

    assert payload["summary"]["font_count"] == 1
    assert payload["fonts"][0].endswith("/sample.otf")
    assert payload["warnings"] == []


def test_table_output_lists_fonts_and_placeholder_for_empty_result() -> None:
    """Verify the table shows each font and '-' when nothing was found."""
    result = {
        "summary": {"root": "/fonts", "font_count": 2, "warnings_count": 1, "duration_ms": 3},
        "fonts": ["/fonts/a.ttf", "/fonts/sub/b.otf"],
        "warnings": ["font-finder | Invalid font directory: boom"],
    }

    rendered = cli_main.format_table_output(result)
    empty = cli_main.format_table_output({"summary": {}, "fonts": [], "warnings": []})

    assert "Fonts found: 2" in rendered
    assert "/fonts/sub/b.otf" in rendered
    assert "=== Warnings ===" in rendered
    assert "=== Fonts ===\n-" in empty
    assert "=== Warnings ===" not in empty


def test_table_output_from_cli(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify the default table output prints summary and font paths."""
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "deep.TTF").write_bytes(b"")

    monkeypatch.setattr(
        sys,
        "argv",
        ["main.py", "--path", str(tmp_path), "--format", "table"],
    )
    exit_code = cli_main.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "=== Scan Summary ===" in captured.out
    assert "Fonts found: 1" in captured.out
    assert "nested/deep.TTF" in captured.out
