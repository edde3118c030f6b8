"""
Global test configuration fixtures for msgextract tests.

Provides resolved option fixtures and small builders for parser-agnostic
node descriptors.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from msgextract.config.manager import resolve_options
from msgextract.config.schema import ResolvedOptions
from msgextract.extraction.nodes import (
    Attribute,
    CallNode,
    ElementNode,
    NameRef,
    StringLiteral,
)


@pytest.fixture
def default_options() -> ResolvedOptions:
    """Resolved options with nothing overridden."""
    return resolve_options()


@pytest.fixture
def make_options() -> Callable[..., ResolvedOptions]:
    """
    Build resolved options from keyword overrides.

    Returns:
        Factory accepting ``ExtractionOptions`` fields as keywords
    """

    def _make(**overrides: object) -> ResolvedOptions:
        return resolve_options(overrides)

    return _make


@pytest.fixture
def make_call() -> Callable[..., CallNode]:
    """Build a call descriptor with string literal arguments."""

    def _make(name: str, *args: str, line: int = 1) -> CallNode:
        return CallNode(
            callee=NameRef(name),
            arguments=tuple(StringLiteral(arg) for arg in args),
            line=line,
        )

    return _make


@pytest.fixture
def make_element() -> Callable[..., ElementNode]:
    """Build an element descriptor with string literal attributes."""

    def _make(tag: str, line: int = 1, has_children: bool = False, **attributes: str) -> ElementNode:
        return ElementNode(
            tag=tag,
            attributes=tuple(
                Attribute(name, StringLiteral(value)) for name, value in attributes.items()
            ),
            line=line,
            has_children=has_children,
        )

    return _make
