#!/usr/bin/env python3
"""
Command-line interface for extracting translatable strings into a .pot file.

Usage Examples:
    Extract strings from all JSX files:
        msgextract 'src/**/*.jsx'

    Write the template to a file:
        msgextract 'src/**/*.js' --output locale/messages.pot

    Exclude test files and leave out source references:
        msgextract 'src/**/*.js' '!src/**/*.test.js' --no-references
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NamedTuple

from . import __version__
from .api import expand_globs, extract_messages_from_files
from .catalog.pot import output_pot, to_pot
from .config.defaults import NO_REFERENCES
from .config.manager import ConfigManager
from .config.schema import ExtractionOptions


class ExtractArgs(NamedTuple):
    """Type-safe container for command-line arguments."""

    patterns: list[str]
    output: Path | None
    config_file: Path | None
    language: str | None
    no_references: bool
    verbose: bool


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for msgextract.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="msgextract",
        description="Extract gettext strings from JavaScript/JSX and Python sources into a .pot file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 'src/**/*.jsx'                          # Print a template to stdout
  %(prog)s 'src/**/*.js' -o locale/messages.pot    # Write the template to a file
  %(prog)s 'src/**/*.js' '!src/vendor/**'          # Exclude matches
  %(prog)s -c msgextract.yml 'app/**/*.py'         # Use custom mappings
        """,
    )

    _ = parser.add_argument(
        "patterns",
        nargs="+",
        metavar="PATTERN",
        help="Glob patterns of source files; prefix with ! to exclude",
    )

    _ = parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output .pot file path (default: stdout)",
    )

    _ = parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        default=None,
        help="YAML file with function and component mappings",
    )

    _ = parser.add_argument(
        "--language",
        choices=["javascript", "python"],
        default=None,
        help="Source language (default: guessed from each file suffix)",
    )

    _ = parser.add_argument(
        "--no-references",
        action="store_true",
        help="Leave out source file references",
    )

    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_arguments(args: list[str] | None = None) -> ExtractArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments in a type-safe container
    """
    parsed = create_argument_parser().parse_args(args)

    return ExtractArgs(
        patterns=parsed.patterns,  # pyright: ignore[reportAny]
        output=parsed.output,  # pyright: ignore[reportAny]
        config_file=parsed.config_file,  # pyright: ignore[reportAny]
        language=parsed.language,  # pyright: ignore[reportAny]
        no_references=parsed.no_references,  # pyright: ignore[reportAny]
        verbose=parsed.verbose,  # pyright: ignore[reportAny]
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the string extraction command.

    Returns:
        Exit code (0 for success, 1 for error, 130 when interrupted)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    try:
        config_manager = ConfigManager()
        if args.config_file is not None:
            _ = config_manager.load_ambient(args.config_file)

        overrides = ExtractionOptions(
            filename=NO_REFERENCES if args.no_references else None,
            language=args.language,  # pyright: ignore[reportArgumentType]
        )

        files = expand_globs(args.patterns)
        if not files:
            logger.warning(f"No files matched: {' '.join(args.patterns)}")

        entries = extract_messages_from_files(files, overrides, config_manager.ambient)
        content = output_pot(to_pot(entries), args.output)

        if args.output is None:
            _ = sys.stdout.write(content)
        else:
            logger.info(f"Extracted {len(entries)} strings from {len(files)} files")

        return 0

    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 130
    except Exception as e:
        logger.error(f"Error during string extraction: {e}")
        if args.verbose:
            logger.exception("Full traceback:")
        return 1


if __name__ == "__main__":
    sys.exit(main())
