"""
JavaScript/JSX source adapter built on tree-sitter.

Produces call descriptors for every ``call_expression``, element
descriptors for every JSX opening tag and text descriptors for every run of
JSX text, in document pre-order.
"""

from __future__ import annotations

import html
import logging
import re
import sys
from collections.abc import Iterator

import tree_sitter_javascript as ts_javascript
from tree_sitter import Language, Node, Parser

from ..extraction.nodes import (
    Attribute,
    CallNode,
    Callee,
    Concatenation,
    DynamicValue,
    ElementNode,
    MemberRef,
    NameRef,
    StringLiteral,
    SyntaxNode,
    TemplateLiteral,
    TextNode,
    ValueNode,
)
from ..utils.exceptions import SourceParseError

logger = logging.getLogger(__name__)

# Children of a JSX element that form one contiguous run of text
_TEXT_TYPES = frozenset({"jsx_text", "html_character_reference"})

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-7]{1,3}|\r\n|[\s\S])"
)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}


def _replace_escape(match: re.Match[str]) -> str:
    sequence = match.group(1)
    if sequence.startswith("u{"):
        code_point = int(sequence[2:-1], 16)
        if code_point > sys.maxunicode:
            raise ValueError(f"Undefined Unicode code-point \\{sequence}")
        return chr(code_point)
    if sequence[0] == "u" and len(sequence) == 5:
        return chr(int(sequence[1:], 16))
    if sequence[0] == "x" and len(sequence) == 3:
        return chr(int(sequence[1:], 16))
    if sequence[0] in "01234567":
        return chr(int(sequence, 8))
    return _SIMPLE_ESCAPES.get(sequence, sequence)


def decode_js_string(raw: str) -> str:
    """
    Decode the escape sequences of a JavaScript string body.

    Args:
        raw: String contents without the surrounding quotes

    Returns:
        The cooked string value

    Raises:
        ValueError: If a code point escape is outside the Unicode range
    """
    if "\\" not in raw:
        return raw
    cooked = _ESCAPE_RE.sub(_replace_escape, raw)
    # Join UTF-16 surrogate pairs written as two \u escapes
    return cooked.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _first_named(node: Node) -> Node | None:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _find_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class _TreeReader:
    """Reads descriptors out of one parsed tree."""

    def __init__(self, source: bytes, filename: str | None = None) -> None:
        self.source: bytes = source
        self.filename: str | None = filename

    def text(self, node: Node | None) -> str:
        if node is None:
            return ""
        return self.slice(node.start_byte, node.end_byte)

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8", "replace")

    def decode(self, raw: str, node: Node) -> str:
        try:
            return decode_js_string(raw)
        except ValueError as e:
            line = _line(node)
            logger.error(f"Invalid escape in {self.filename or '<source>'} at line {line}: {e}")
            raise SourceParseError(
                f"Invalid string escape at line {line}: {e}", filename=self.filename, line=line
            ) from e

    def walk(self, root: Node) -> Iterator[SyntaxNode]:
        stack: list[Node | TextNode] = [root]

        while stack:
            item = stack.pop()
            if isinstance(item, TextNode):
                yield item
                continue

            node = item
            match node.type:
                case "call_expression":
                    call = self.call(node)
                    if call is not None:
                        yield call
                    stack.extend(reversed(node.children))
                case "jsx_self_closing_element":
                    yield self.element(node, has_children=False)
                    stack.extend(reversed(node.children))
                case "jsx_element":
                    element = self.opening_element(node)
                    stack.extend(reversed(self.element_items(node, element)))
                    if element is not None:
                        yield element
                case _:
                    stack.extend(reversed(node.children))

    def opening_element(self, node: Node) -> ElementNode | None:
        open_tag = node.child_by_field_name("open_tag")
        if open_tag is None:
            return None
        # Any source between the tags is content, whitespace included
        close_tag = node.child_by_field_name("close_tag")
        body_end = close_tag.start_byte if close_tag is not None else node.end_byte
        has_children = body_end > open_tag.end_byte
        return self.element(open_tag, has_children=has_children)

    def element_items(self, node: Node, element: ElementNode | None) -> list[Node | TextNode]:
        """Children of a JSX element with each run of text folded into one descriptor."""
        items: list[Node | TextNode] = []
        run: list[Node] = []

        def flush() -> None:
            if run and element is not None:
                raw = self.slice(run[0].start_byte, run[-1].end_byte)
                items.append(TextNode(html.unescape(raw), _line(run[0]), element))
            run.clear()

        for child in node.children:
            if child.type in _TEXT_TYPES:
                run.append(child)
                continue
            flush()
            items.append(child)
        flush()
        return items

    def call(self, node: Node) -> CallNode | None:
        arguments = node.child_by_field_name("arguments")
        # Tagged templates carry a template_string here and are not calls
        if arguments is None or arguments.type != "arguments":
            return None
        return CallNode(
            callee=self.callee(node.child_by_field_name("function")),
            arguments=tuple(
                self.value(arg) for arg in arguments.named_children if arg.type != "comment"
            ),
            line=_line(node),
        )

    def callee(self, node: Node | None) -> Callee | None:
        if node is None:
            return None
        if node.type == "identifier":
            return NameRef(self.text(node))
        if node.type != "member_expression":
            return None

        path: list[str] = []
        current: Node | None = node
        while current is not None and current.type == "member_expression":
            path.append(self.text(current.child_by_field_name("property")))
            current = current.child_by_field_name("object")
        if current is not None and current.type in ("identifier", "this"):
            path.append(self.text(current))
        return MemberRef(tuple(reversed(path)))

    def element(self, node: Node, has_children: bool) -> ElementNode:
        attributes = tuple(
            self.attribute(child) for child in node.named_children if child.type == "jsx_attribute"
        )
        return ElementNode(
            tag=self.text(node.child_by_field_name("name")),
            attributes=attributes,
            line=_line(node),
            has_children=has_children,
        )

    def attribute(self, node: Node) -> Attribute:
        parts = [child for child in node.named_children if child.type != "comment"]
        name = self.text(parts[0]) if parts else ""
        if len(parts) < 2:
            return Attribute(name, None)

        value = parts[1]
        if value.type == "string":
            # JSX attribute strings have no escapes, only HTML entities
            raw = self.slice(value.start_byte + 1, value.end_byte - 1)
            return Attribute(name, StringLiteral(html.unescape(raw)))
        return Attribute(name, self.value(value))

    def value(self, node: Node | None) -> ValueNode:
        if node is None:
            return DynamicValue()

        match node.type:
            case "string":
                raw = self.slice(node.start_byte + 1, node.end_byte - 1)
                return StringLiteral(self.decode(raw, node))
            case "template_string":
                return self.template(node)
            case "binary_expression":
                operator = node.child_by_field_name("operator")
                if operator is None or operator.type != "+":
                    return DynamicValue()
                return Concatenation(
                    self.value(node.child_by_field_name("left")),
                    self.value(node.child_by_field_name("right")),
                )
            case "parenthesized_expression" | "jsx_expression":
                return self.value(_first_named(node))
            case _:
                return DynamicValue()

    def template(self, node: Node) -> TemplateLiteral:
        parts: list[str] = []
        cursor = node.start_byte + 1
        has_expressions = False
        for child in node.named_children:
            if child.type != "template_substitution":
                continue
            has_expressions = True
            parts.append(self.decode(self.slice(cursor, child.start_byte), node))
            cursor = child.end_byte
        parts.append(self.decode(self.slice(cursor, node.end_byte - 1), node))
        return TemplateLiteral(tuple(parts), has_expressions)


class JavaScriptAdapter:
    """Adapter for JavaScript and JSX source."""

    def __init__(self) -> None:
        self._parser: Parser = Parser(Language(ts_javascript.language()))

    def parse(self, source: str | bytes, filename: str | None = None) -> Iterator[SyntaxNode]:
        """
        Parse JavaScript/JSX source into node descriptors.

        Args:
            source: Source text
            filename: Name used in error messages

        Returns:
            Iterator over descriptors in document pre-order

        Raises:
            SourceParseError: If the source contains syntax errors
        """
        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(data)

        error = _find_error(tree.root_node)
        if error is not None:
            line = _line(error)
            logger.error(f"Syntax error in {filename or '<source>'} at line {line}")
            raise SourceParseError(
                f"Invalid JavaScript syntax at line {line}", filename=filename, line=line
            )

        # Escape errors raise from parse(), not during iteration
        return iter(list(_TreeReader(data, filename).walk(tree.root_node)))
