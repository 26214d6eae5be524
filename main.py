"""CLI entry point for the font finder."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from fontfinder.config import FinderSettings, assets_prefix_from_env
from fontfinder.engine import scan


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line parser."""
    parser = argparse.ArgumentParser(description="Find font files in a directory tree")
    parser.add_argument("--path", required=True, help="Directory path to scan")
    parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--output",
        help="Optional file path to write output (overwrites existing file)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose debug output",
    )
    parser.add_argument(
        "--assets-prefix",
        default=None,
        help="Path prefix served by the remote 'forgevtt' assets source "
        "(default: $FONTFINDER_ASSETS_PREFIX or $FORGEVTT_ASSETS_LIBRARY_URL_PREFIX). "
        "The CLI registers no backend for that source, so prefixed directories "
        "are reported as warnings and skipped",
    )
    parser.add_argument(
        "--shared-depth",
        action="store_true",
        help="Count depth across sibling directories instead of per branch",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Configure loguru output for CLI messages."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="DEBUG" if verbose else "INFO",
        format="{message}",
        filter=lambda record: record["level"].name in {"INFO", "DEBUG"},
    )
    logger.add(sys.stderr, level="WARNING", format="{message}")


def build_settings(args: argparse.Namespace) -> FinderSettings:
    """Resolve CLI arguments into finder settings."""
    assets_prefix = args.assets_prefix
    if assets_prefix is None:
        assets_prefix = assets_prefix_from_env()
    return FinderSettings(assets_prefix=assets_prefix, shared_depth=args.shared_depth)


def format_json_output(result: dict[str, Any]) -> str:
    """Render scan result as pretty JSON."""
    return json.dumps(result, indent=2)


def format_table_output(result: dict[str, Any]) -> str:
    """Render scan result as a human-readable listing."""
    summary = result.get("summary", {})
    fonts = result.get("fonts", [])
    warnings = result.get("warnings", [])

    lines = [
        "=== Scan Summary ===",
        f"Root: {summary.get('root', '')}",
        f"Fonts found: {summary.get('font_count', 0)}",
        f"Warnings: {summary.get('warnings_count', 0)}",
        f"Duration: {summary.get('duration_ms', 0)} ms",
        "",
        "=== Fonts ===",
        *(fonts or ["-"]),
    ]
    if warnings:
        lines.extend(["", "=== Warnings ===", *warnings])

    return "\n".join(lines)


def write_output_file(output_path: str, content: str) -> None:
    """Write rendered content to an output file, overwriting if it exists."""
    Path(output_path).write_text(f"{content}\n", encoding="utf-8")


def main() -> int:
    """Run the font finder CLI."""
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(verbose=args.verbose)
    settings = build_settings(args)

    target_path = Path(args.path)
    if not target_path.exists():
        logger.error(f"Error: path does not exist: {target_path}")
        return 1
    if not target_path.is_dir():
        logger.error(f"Error: path is not a directory: {target_path}")
        return 1

    if args.verbose:
        logger.debug(f"[DEBUG] Starting scan for: {target_path}")

    try:
        report = asyncio.run(scan(target_path.as_posix(), settings=settings))
    except Exception as exc:
        logger.error(f"Error: scan failed: {exc}")
        return 1

    result = report.to_dict()
    if args.format == "json":
        rendered_output = format_json_output(result)
    else:
        rendered_output = format_table_output(result)

    logger.info(rendered_output)

    if args.output:
        try:
            write_output_file(args.output, rendered_output)
        except OSError as exc:
            logger.error(f"Error: failed to write output file '{args.output}': {exc}")
            return 1
        if args.verbose:
            logger.debug(f"[DEBUG] Wrote output to: {args.output}")

    return 2 if report.has_warnings else 0


if __name__ == "__main__":
    raise SystemExit(main())
