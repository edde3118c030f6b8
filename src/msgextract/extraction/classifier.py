"""
Node classification predicates.

Pure functions deciding whether a syntax node descriptor is a recognized
translatable call or UI element, and resolving static string values.
"""

from __future__ import annotations

from collections.abc import Container

from .nodes import (
    CallNode,
    Concatenation,
    ElementNode,
    MemberRef,
    NameRef,
    StringLiteral,
    SyntaxNode,
    TemplateLiteral,
    ValueNode,
)


def resolve_call_name(node: CallNode) -> str | None:
    """
    Resolve the name a call is matched by.

    Args:
        node: Call node descriptor

    Returns:
        The identifier for plain calls, the final property name for dotted
        access, None when the callee is not resolvable
    """
    match node.callee:
        case NameRef(name=name):
            return name
        case MemberRef() as member:
            return member.property_name
        case _:
            return None


def is_recognized_call(names: Container[str], node: SyntaxNode) -> bool:
    """Check whether ``node`` is a call to one of ``names``."""
    if not isinstance(node, CallNode):
        return False
    name = resolve_call_name(node)
    return name is not None and name in names


def is_recognized_component(names: Container[str], node: SyntaxNode | None) -> bool:
    """Check whether ``node`` is an opening tag of one of the ``names`` elements."""
    return isinstance(node, ElementNode) and node.tag in names


def extract_static_string(value: ValueNode | None) -> str | None:
    """
    Resolve the literal string value of an argument or attribute value.

    Best-effort: anything that is not statically known yields None.

    Args:
        value: Value descriptor

    Returns:
        The string value, or None if it cannot be resolved statically
    """
    match value:
        case StringLiteral(value=text):
            return text
        case TemplateLiteral(parts=parts, has_expressions=False):
            return "".join(parts)
        case Concatenation(left=left, right=right):
            left_text = extract_static_string(left)
            if left_text is None:
                return None
            right_text = extract_static_string(right)
            if right_text is None:
                return None
            return left_text + right_text
        case _:
            return None
