"""
Basic exception classes for msgextract.

This module contains the exception hierarchy used throughout the package
without creating import cycles.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    PARSE = "parse"
    CONFIGURATION = "configuration"
    IO = "io"
    UNKNOWN = "unknown"


class MsgExtractError(Exception):
    """Base exception class for msgextract specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.context: object | None = context


class SourceParseError(MsgExtractError):
    """Source text could not be parsed into a syntax tree."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        line: int | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PARSE,
            context={"filename": filename, "line": line},
        )
        self.filename: str | None = filename
        self.line: int | None = line


class ConfigurationError(MsgExtractError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        context: object | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            context=context,
        )


class UnsupportedLanguageError(ConfigurationError):
    """No parser adapter is available for the requested language."""

    def __init__(self, language: str) -> None:
        super().__init__(
            f"Unsupported source language: {language!r}",
            context={"language": language},
        )
        self.language: str = language
