"""Command-line interface for the AEDoc extractor.

This module provides the main entry point for running the extractor from the
command line. It uses argparse to handle subcommands and configuration.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .analysis.collector import DocumentationCollector
from .analysis.extractor_context import ExtractorContext
from .models.api_item import ApiItemKind
from .models.extraction_result import ExtractionResult
from .models.markup import Markup
from .utils.config import ExtractorConfig
from .utils.manifest import build_collector, load_manifest

STANDALONE_PACKAGE_NAME = "local-package"
STANDALONE_ITEM_NAME = "comment"


def build_config(args: argparse.Namespace) -> ExtractorConfig:
    """Create the extraction config from the environment and CLI flags.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ExtractorConfig with CLI flags taking precedence over the environment.
    """
    config = ExtractorConfig.from_env()
    if args.enforce_inherited_deprecation:
        config.enforce_inherited_deprecation = True
    return config


def format_json(result: ExtractionResult) -> str:
    """Format an extraction result as JSON.

    Args:
        result: ExtractionResult to format.

    Returns:
        JSON string representation.
    """
    return json.dumps(result.to_dict(), indent=2)


def format_summary(result: ExtractionResult) -> str:
    """Format an extraction result as a human-readable summary.

    Args:
        result: ExtractionResult to format.

    Returns:
        Formatted summary string.
    """
    lines = []
    lines.append("=" * 60)
    lines.append("AEDoc Extraction Summary")
    lines.append("=" * 60)
    lines.append("")
    lines.append(f"Package: {result.package_name}")
    lines.append(
        f"Items: {result.total_items} "
        f"({len(result.get_failed_items())} with errors)"
    )
    lines.append("")

    for item in result.iter_all_items():
        doc = item.documentation
        summary = Markup.extract_text_content(doc.summary).strip() or "(no summary)"
        lines.append(f"  {doc.item_name} [{item.kind.value}, {doc.release_tag.value}]")
        lines.append(f"    {summary}")
    lines.append("")

    if result.diagnostics:
        lines.append("Errors:")
        lines.append("-" * 60)
        for diagnostic in result.diagnostics:
            lines.append(f"  - {diagnostic}")
        lines.append("")

    if result.warnings:
        lines.append("Warnings:")
        lines.append("-" * 60)
        for warning in result.warnings:
            lines.append(f"  - {warning}")
        lines.append("")

    return "\n".join(lines)


def _emit(result: ExtractionResult, args: argparse.Namespace) -> int:
    if args.format == "json":
        print(format_json(result))
    else:
        print(format_summary(result))

    if args.strict and result.diagnostics:
        return 1
    return 0


def cmd_parse(args: argparse.Namespace, config: ExtractorConfig) -> int:
    """Parse a single comment from a file or stdin.

    Args:
        args: Parsed command-line arguments.
        config: Extraction settings.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {args.file}")
        comment = path.read_text(encoding="utf-8")
    else:
        comment = sys.stdin.read()

    context = ExtractorContext(args.package, config=config)
    collector = DocumentationCollector(context)
    collector.add_item(STANDALONE_ITEM_NAME, ApiItemKind(args.kind), comment)
    return _emit(collector.complete(verbose=args.verbose), args)


def cmd_extract(args: argparse.Namespace, config: ExtractorConfig) -> int:
    """Extract documentation for every item listed in a manifest.

    Args:
        args: Parsed command-line arguments.
        config: Extraction settings.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    collector = build_collector(load_manifest(Path(args.manifest)), config=config)
    if args.verbose:
        print(f"Loaded manifest for {collector.context.package_name}", file=sys.stderr)
    return _emit(collector.complete(verbose=args.verbose), args)


def main(argv: list | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        prog="aedoc",
        description="Extract and validate AEDoc documentation comments",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=["json", "summary"],
        default="summary",
        help="Output format (default: summary)",
    )
    common.add_argument(
        "--verbose", action="store_true", help="Show progress and debug logging"
    )
    common.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any documentation error was reported",
    )
    common.add_argument(
        "--enforce-inherited-deprecation",
        action="store_true",
        help=(
            "Require @deprecated on items whose @inheritdoc target is deprecated, "
            "checked after inheritance is resolved"
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Parse a single AEDoc comment"
    )
    parse_parser.add_argument(
        "file", nargs="?", help="File containing the comment (default: stdin)"
    )
    parse_parser.add_argument(
        "--package",
        default=STANDALONE_PACKAGE_NAME,
        help=f"Package that unqualified references belong to (default: {STANDALONE_PACKAGE_NAME})",
    )
    parse_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in ApiItemKind],
        default=ApiItemKind.FUNCTION.value,
        help="Kind of declaration the comment belongs to (default: function)",
    )

    # Extract command
    extract_parser = subparsers.add_parser(
        "extract", parents=[common], help="Extract documentation for a package manifest"
    )
    extract_parser.add_argument("manifest", help="Path to the manifest JSON file")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        config = build_config(args)
        if args.command == "parse":
            return cmd_parse(args, config)
        elif args.command == "extract":
            return cmd_extract(args, config)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
