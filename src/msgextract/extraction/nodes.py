"""
Parser-agnostic syntax node descriptors.

Parser adapters translate their concrete trees into this closed set of
variants so that classification and block building never touch a
parser's own node types.
"""

from __future__ import annotations

from dataclasses import dataclass


# == Value descriptors ==


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """A plain string literal with its decoded value."""

    value: str


@dataclass(frozen=True, slots=True)
class TemplateLiteral:
    """A template/format string; ``parts`` are its static pieces."""

    parts: tuple[str, ...]
    has_expressions: bool = False


@dataclass(frozen=True, slots=True)
class Concatenation:
    """A binary ``+`` of two values."""

    left: ValueNode
    right: ValueNode


@dataclass(frozen=True, slots=True)
class DynamicValue:
    """Any value that cannot be resolved statically."""


ValueNode = StringLiteral | TemplateLiteral | Concatenation | DynamicValue


# == Callee descriptors ==


@dataclass(frozen=True, slots=True)
class NameRef:
    """A plain identifier callee, e.g. ``gettext(...)``."""

    name: str


@dataclass(frozen=True, slots=True)
class MemberRef:
    """A dotted access callee, e.g. ``i18n.gettext(...)``."""

    path: tuple[str, ...]

    @property
    def property_name(self) -> str:
        """Final property name of the access."""
        return self.path[-1]


Callee = NameRef | MemberRef


# == Syntax node descriptors ==


@dataclass(frozen=True, slots=True)
class CallNode:
    """A call expression."""

    callee: Callee | None
    arguments: tuple[ValueNode, ...]
    line: int


@dataclass(frozen=True, slots=True)
class Attribute:
    """A UI-element attribute; ``value`` is None for bare boolean attributes."""

    name: str
    value: ValueNode | None


@dataclass(frozen=True, slots=True)
class ElementNode:
    """A UI-element opening tag."""

    tag: str
    attributes: tuple[Attribute, ...]
    line: int
    has_children: bool = False


@dataclass(frozen=True, slots=True)
class TextNode:
    """Raw text content of a UI-element, with its enclosing opening tag."""

    text: str
    line: int
    element: ElementNode


SyntaxNode = CallNode | ElementNode | TextNode
