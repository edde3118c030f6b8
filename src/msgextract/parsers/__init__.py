"""
Parser adapters.

Adapters turn source text into the parser-agnostic node descriptors
consumed by the traversal engine.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from ..config.schema import Language
from ..extraction.nodes import SyntaxNode
from ..utils.exceptions import UnsupportedLanguageError

PYTHON_SUFFIXES = frozenset({".py", ".pyi"})


class ParserAdapter(Protocol):
    """Turns source text into node descriptors in document order."""

    def parse(self, source: str | bytes, filename: str | None = None) -> Iterator[SyntaxNode]:
        """Parse ``source``; raises ``SourceParseError`` on malformed input."""
        ...


_adapters: dict[str, ParserAdapter] = {}


def get_adapter(language: str) -> ParserAdapter:
    """
    Get the (cached) adapter for a source language.

    Args:
        language: ``"javascript"`` or ``"python"``

    Returns:
        Parser adapter for the language

    Raises:
        UnsupportedLanguageError: If no adapter exists for the language
    """
    if language in _adapters:
        return _adapters[language]

    match language:
        case "javascript":
            from .javascript import JavaScriptAdapter

            adapter: ParserAdapter = JavaScriptAdapter()
        case "python":
            from .python_ast import PythonAdapter

            adapter = PythonAdapter()
        case _:
            raise UnsupportedLanguageError(language)

    _adapters[language] = adapter
    return adapter


def language_for_path(path: Path | str) -> Language:
    """Guess the source language from a file suffix."""
    if Path(path).suffix.lower() in PYTHON_SUFFIXES:
        return "python"
    return "javascript"


__all__ = ["ParserAdapter", "get_adapter", "language_for_path"]
