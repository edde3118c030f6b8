"""Python source adapter built on the standard library ``ast`` module."""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator
from typing import override

from ..extraction.nodes import (
    CallNode,
    Callee,
    Concatenation,
    DynamicValue,
    MemberRef,
    NameRef,
    StringLiteral,
    SyntaxNode,
    TemplateLiteral,
    ValueNode,
)
from ..utils.exceptions import SourceParseError

logger = logging.getLogger(__name__)


def _callee(func_node: ast.expr) -> Callee | None:
    """
    Describe the function being called.

    Args:
        func_node: AST node representing the function being called

    Returns:
        Name or dotted access descriptor, None for other callees
    """
    if isinstance(func_node, ast.Name):
        return NameRef(func_node.id)

    if isinstance(func_node, ast.Attribute):
        path: list[str] = []
        current: ast.expr = func_node
        while isinstance(current, ast.Attribute):
            path.append(current.attr)
            current = current.value
        if isinstance(current, ast.Name):
            path.append(current.id)
        return MemberRef(tuple(reversed(path)))

    return None


def _value(node: ast.expr) -> ValueNode:
    """Describe an argument expression."""
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return StringLiteral(node.value)

    if isinstance(node, ast.JoinedStr):
        parts: list[str] = []
        has_expressions = False
        for part in node.values:
            if isinstance(part, ast.Constant) and isinstance(part.value, str):
                parts.append(part.value)
            else:
                has_expressions = True
        return TemplateLiteral(tuple(parts), has_expressions)

    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.Add):
        return Concatenation(_value(node.left), _value(node.right))

    return DynamicValue()


class CallCollector(ast.NodeVisitor):
    """AST visitor collecting call descriptors in document order."""

    def __init__(self) -> None:
        self.nodes: list[SyntaxNode] = []

    @override
    def visit_Call(self, node: ast.Call) -> None:
        """
        Record a call and continue into its children.

        Args:
            node: AST Call node to examine
        """
        self.nodes.append(
            CallNode(
                callee=_callee(node.func),
                arguments=tuple(_value(arg) for arg in node.args),
                line=node.lineno,
            )
        )
        self.generic_visit(node)


class PythonAdapter:
    """Adapter for Python source; Python has no markup, so only calls are produced."""

    def parse(self, source: str | bytes, filename: str | None = None) -> Iterator[SyntaxNode]:
        """
        Parse Python source into call descriptors.

        Args:
            source: Python source text
            filename: Name used in error messages

        Returns:
            Iterator over call descriptors

        Raises:
            SourceParseError: If the source contains invalid Python syntax
        """
        try:
            tree = ast.parse(source, filename=filename or "<unknown>")
        except SyntaxError as e:
            logger.error(f"Syntax error in {filename or '<source>'}: {e}")
            raise SourceParseError(
                f"Invalid Python syntax: {e.msg}", filename=filename, line=e.lineno
            ) from e

        collector = CallCollector()
        collector.visit(tree)
        return iter(collector.nodes)
