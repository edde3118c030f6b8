"""
Public extraction entry points.

Usage Examples:
    Extract entries from source text:
        >>> from msgextract import extract_messages
        >>> entries = extract_messages('gettext("Hello")')
        >>> entries[0].id
        'Hello'

    Extract entries from every file matching a glob:
        >>> from msgextract import extract_messages_from_glob
        >>> entries = extract_messages_from_glob(["src/**/*.jsx"])
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .config.defaults import NO_REFERENCES
from .config.manager import OptionsLike, coerce_options, resolve_options
from .config.schema import ExtractionOptions, ResolvedOptions
from .extraction.blocks import CatalogEntry
from .extraction.merge import get_unique_blocks
from .extraction.nodes import SyntaxNode
from .extraction.traversal import collect_blocks, traverse
from .parsers import get_adapter, language_for_path
from .utils.exceptions import SourceParseError

logger = logging.getLogger(__name__)


def _parse(code: str | bytes, language: str, filename: str | None) -> Iterator[SyntaxNode]:
    display_name = None if filename == NO_REFERENCES else filename
    return get_adapter(language).parse(code, filename=display_name)


def extract_messages(
    code: str | bytes,
    options: OptionsLike | None = None,
    ambient: OptionsLike | None = None,
) -> list[CatalogEntry]:
    """
    Extract deduplicated catalog entries from source text.

    Args:
        code: Source text
        options: Per-call options
        ambient: Process-level options sitting between ``options`` and the defaults

    Returns:
        Unique entries in first-seen order

    Raises:
        SourceParseError: If the source cannot be parsed
    """
    resolved = resolve_options(options, ambient)
    return traverse(_parse(code, resolved.language, resolved.filename), resolved)


def _file_options(
    path: Path,
    options: OptionsLike | None,
    ambient: OptionsLike | None,
) -> ResolvedOptions:
    """Resolve options for one file; the path becomes the reference filename."""
    layers = (coerce_options(ambient), coerce_options(options))
    resolved = resolve_options(layers[1], layers[0])

    language = resolved.language
    if all(layer is None or layer.language is None for layer in layers):
        language = language_for_path(path)

    filename = NO_REFERENCES if resolved.filename == NO_REFERENCES else str(path)
    return resolved.model_copy(update={"filename": filename, "language": language})


def _collect_file(
    path: Path,
    options: OptionsLike | None,
    ambient: OptionsLike | None,
) -> list[CatalogEntry]:
    resolved = _file_options(path, options, ambient)
    try:
        with open(path, "r", encoding="utf-8") as file:
            content = file.read()
    except UnicodeDecodeError as e:
        logger.error(f"Cannot decode {path} as UTF-8: {e}")
        raise SourceParseError(f"{path} is not valid UTF-8: {e}", filename=str(path)) from e

    blocks = collect_blocks(_parse(content, resolved.language, str(path)), resolved)
    logger.info(f"Extracted {len(blocks)} strings from {path}")
    return blocks


def extract_messages_from_file(
    path: Path | str,
    options: OptionsLike | None = None,
    ambient: OptionsLike | None = None,
) -> list[CatalogEntry]:
    """
    Extract deduplicated catalog entries from a file.

    The file path is used for source references unless the resolved
    ``filename`` option is ``"none"``. The language defaults from the
    file suffix unless set explicitly.

    Args:
        path: Path to a UTF-8 source file
        options: Per-call options
        ambient: Process-level options

    Returns:
        Unique entries in first-seen order

    Raises:
        FileNotFoundError: If the file doesn't exist
        SourceParseError: If the file cannot be decoded or parsed
    """
    return get_unique_blocks(_collect_file(Path(path), options, ambient))


def extract_messages_from_files(
    paths: Iterable[Path | str],
    options: OptionsLike | None = None,
    ambient: OptionsLike | None = None,
) -> list[CatalogEntry]:
    """
    Extract one catalog from several files.

    Files are processed in order; their raw entries are concatenated and
    merged once, so duplicates across files collapse into one entry.
    A parse failure in any file aborts the whole extraction.

    Args:
        paths: Source files
        options: Per-call options
        ambient: Process-level options

    Returns:
        Unique entries in first-seen order
    """
    blocks: list[CatalogEntry] = []
    count = 0
    for path in paths:
        blocks.extend(_collect_file(Path(path), options, ambient))
        count += 1

    unique = get_unique_blocks(blocks)
    logger.info(f"Scanned {count} files, found {len(unique)} unique strings")
    return unique


def expand_globs(patterns: Sequence[str]) -> list[Path]:
    """
    Expand glob patterns into a sorted list of files.

    Patterns starting with ``!`` exclude matches. ``**`` matches
    directories recursively.

    Args:
        patterns: Glob patterns

    Returns:
        Matching files, sorted and without duplicates
    """
    included: set[str] = set()
    excluded: set[str] = set()

    for pattern in patterns:
        if pattern.startswith("!"):
            excluded.update(glob.glob(pattern[1:], recursive=True))
        else:
            included.update(glob.glob(pattern, recursive=True))

    files = sorted(path for path in included - excluded if Path(path).is_file())
    logger.debug(f"Expanded {len(patterns)} patterns to {len(files)} files")
    return [Path(path) for path in files]


def extract_messages_from_glob(
    patterns: Sequence[str] | str,
    options: OptionsLike | None = None,
    ambient: OptionsLike | None = None,
) -> list[CatalogEntry]:
    """Extract one catalog from every file matching the glob patterns."""
    if isinstance(patterns, str):
        patterns = [patterns]
    return extract_messages_from_files(expand_globs(patterns), options, ambient)


def merge_catalogs(results: Iterable[Iterable[CatalogEntry]]) -> list[CatalogEntry]:
    """
    Merge per-file results into one cross-file catalog.

    Args:
        results: Entry lists, one per file, in processing order

    Returns:
        Unique entries in first-seen order
    """
    return get_unique_blocks(block for result in results for block in result)


__all__ = [
    "ExtractionOptions",
    "expand_globs",
    "extract_messages",
    "extract_messages_from_file",
    "extract_messages_from_files",
    "extract_messages_from_glob",
    "merge_catalogs",
]
