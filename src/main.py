# src/main.py — v1
"""CLI entry point: hover, assignments, check commands.

Usage:
    xlhover hover <file> <line> <column> [options]
    xlhover assignments <file> [options]
    xlhover check [--workspace DIR]

Lines and columns are one-based, as editors display them.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from xlhover.version import __version__

if TYPE_CHECKING:
    from xlhover.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings(args)
    except Exception as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    _setup_logging(settings, args.verbose)

    try:
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="xlhover",
        description=f"xlhover v{__version__}: element screenshots for selector variables",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- hover ---
    p_hover = subparsers.add_parser(
        "hover", help="Resolve the hover card at a cursor position",
    )
    p_hover.add_argument("file", type=Path, help="Source file")
    p_hover.add_argument("line", type=int, help="Line number (1-based)")
    p_hover.add_argument("column", type=int, help="Column number (1-based)")
    p_hover.add_argument(
        "-w", "--workspace", type=Path, default=None,
        help="Workspace root holding the photos directory (default: cwd)",
    )
    p_hover.add_argument(
        "--language", default=None,
        help="Language id (derived from the file extension if omitted)",
    )
    p_hover.add_argument(
        "--strategy", choices=["index", "scan"], default=None,
        help="Assignment resolution strategy (default: from settings)",
    )
    p_hover.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print the resolution outcome as JSON instead of markdown",
    )
    p_hover.set_defaults(func=_cmd_hover)

    # --- assignments ---
    p_assign = subparsers.add_parser(
        "assignments", help="Print the assignment index of a file",
    )
    p_assign.add_argument("file", type=Path, help="Source file")
    p_assign.add_argument(
        "--language", default=None,
        help="Language id (derived from the file extension if omitted)",
    )
    p_assign.set_defaults(func=_cmd_assignments)

    # --- check ---
    p_check = subparsers.add_parser(
        "check", help="Validate the selector metadata of a workspace",
    )
    p_check.add_argument(
        "-w", "--workspace", type=Path, default=None,
        help="Workspace root (default: cwd)",
    )
    p_check.set_defaults(func=_cmd_check)

    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    from xlhover.config.settings import load_settings

    overrides: dict[str, object] = {}
    if getattr(args, "strategy", None):
        overrides["resolution_strategy"] = args.strategy
    return load_settings(**overrides)


def _cmd_hover(args: argparse.Namespace, settings: Settings) -> int:
    """Resolve and print one hover card."""
    from xlhover.core.models import Position, TextDocument
    from xlhover.hover.render import render_markdown
    from xlhover.hover.resolver import HoverResolver

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1
    if args.line < 1 or args.column < 1:
        logger.error("Line and column are 1-based")
        return 1

    document = TextDocument.from_file(file_path, language_id=args.language)
    workspace = args.workspace or Path.cwd()
    resolver = HoverResolver(workspace_root=workspace, settings=settings)
    outcome = resolver.resolve_outcome(
        document, Position(line=args.line - 1, character=args.column - 1)
    )

    if args.as_json:
        print(outcome.model_dump_json(indent=2))
    elif outcome.payload is not None:
        print(render_markdown(outcome.payload, image_width=settings.image_width))

    if not outcome.shown:
        logger.info("No hover card: %s", outcome.status)
        return 1
    return 0


def _cmd_assignments(args: argparse.Namespace, settings: Settings) -> int:
    """Print identifier -> first assigned value for a file."""
    from xlhover.core.models import TextDocument
    from xlhover.extraction.language import language_mode_for
    from xlhover.index.document_index import build_assignment_index

    file_path: Path = args.file
    if not file_path.is_file():
        logger.error("File not found: %s", file_path)
        return 1

    document = TextDocument.from_file(file_path, language_id=args.language)
    mode = language_mode_for(document.language_id, settings)
    if mode is None:
        logger.error("Unsupported language: %s", document.language_id)
        return 1

    index = build_assignment_index(document.lines, mode)
    print(json.dumps(index, indent=2, ensure_ascii=False))
    return 0


def _cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    """Report descriptors that can never produce a hover card."""
    from xlhover.metadata.layout import metadata_path, photo_path
    from xlhover.metadata.store import MetadataStore

    workspace: Path = args.workspace or Path.cwd()
    meta_file = metadata_path(workspace, settings)
    table = MetadataStore().load(meta_file)
    if table is None:
        logger.error("Selector metadata unavailable: %s", meta_file)
        return 1

    problems = 0
    for name, descriptor in sorted(table.items()):
        if not descriptor.has_selector:
            print(f"  {name}: no xpath or css")
            problems += 1
        if not descriptor.photo:
            print(f"  {name}: no photo")
            problems += 1
        elif not photo_path(workspace, descriptor.photo, settings).is_file():
            print(f"  {name}: missing photo {descriptor.photo}")
            problems += 1

    print(f"\nChecked {len(table)} descriptors in {meta_file}:")
    print(f"  Problems: {problems}")
    return 0 if problems == 0 else 1


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from xlhover.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
