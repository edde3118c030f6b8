"""
Traversal engine.

Walks the node descriptors of one syntax tree, builds raw catalog entries
for recognized calls, elements and element text, and deduplicates them
once the walk completes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..config.manager import resolve_reference_filename
from ..config.schema import ResolvedOptions
from .blocks import (
    CatalogEntry,
    block_from_call,
    block_from_component,
    with_reference,
    with_text_id,
)
from .classifier import is_recognized_call, is_recognized_component, resolve_call_name
from .merge import get_unique_blocks
from .nodes import CallNode, ElementNode, SyntaxNode, TextNode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalContext:
    """State owned by a single traversal pass."""

    options: ResolvedOptions
    filename: str | None
    blocks: list[CatalogEntry] = field(default_factory=list)

    @classmethod
    def for_options(cls, options: ResolvedOptions) -> TraversalContext:
        """Create a fresh context, resolving the reference filename."""
        return cls(options=options, filename=resolve_reference_filename(options.filename))

    def push(self, block: CatalogEntry, line: int) -> None:
        """Record a raw entry, attaching a reference when references are active."""
        if self.filename is not None:
            block = with_reference(block, self.filename, line)
        self.blocks.append(block)


def visit_call(context: TraversalContext, node: CallNode) -> None:
    """Collect an entry from a recognized translation call."""
    funcs = context.options.func_arguments_map
    if not is_recognized_call(funcs, node):
        return

    name = resolve_call_name(node)
    if name is None:
        return
    block = block_from_call(funcs[name], node)
    logger.debug(f"Matched call {name}() at line {node.line}: {block.id!r}")
    context.push(block, node.line)


def visit_element(context: TraversalContext, node: ElementNode) -> None:
    """Collect an entry from a recognized element without child content."""
    props_map = context.options.component_props_map
    if not is_recognized_component(props_map, node):
        return

    # Elements with children are handled through their text
    if node.has_children:
        return

    block = block_from_component(props_map[node.tag], node)
    logger.debug(f"Matched element <{node.tag}> at line {node.line}: {block.id!r}")
    context.push(block, node.line)


def visit_text(context: TraversalContext, node: TextNode) -> None:
    """Collect an entry from the text content of a recognized element."""
    props_map = context.options.component_props_map
    if not is_recognized_component(props_map, node.element):
        return

    text = node.text.strip()
    if not text:
        return

    block = block_from_component(props_map[node.element.tag], node.element)
    block = with_text_id(block, text)
    logger.debug(f"Matched text of <{node.element.tag}> at line {node.line}: {text!r}")
    context.push(block, node.line)


def visit(context: TraversalContext, node: SyntaxNode) -> None:
    """Dispatch a node descriptor to its visit rule."""
    match node:
        case CallNode():
            visit_call(context, node)
        case ElementNode():
            visit_element(context, node)
        case TextNode():
            visit_text(context, node)


def collect_blocks(nodes: Iterable[SyntaxNode], options: ResolvedOptions) -> list[CatalogEntry]:
    """
    Walk a tree's node descriptors and return the raw, unmerged entries.

    Args:
        nodes: Descriptors of one syntax tree in document order
        options: Resolved options of the pass

    Returns:
        Raw entries in discovery order
    """
    context = TraversalContext.for_options(options)
    for node in nodes:
        visit(context, node)
    return context.blocks


def traverse(nodes: Iterable[SyntaxNode], options: ResolvedOptions) -> list[CatalogEntry]:
    """
    Run one traversal pass and return its deduplicated entries.

    Args:
        nodes: Descriptors of one syntax tree in document order
        options: Resolved options of the pass

    Returns:
        Unique entries in first-seen order
    """
    blocks = collect_blocks(nodes, options)
    unique = get_unique_blocks(blocks)
    logger.debug(f"Traversal collected {len(blocks)} raw entries, {len(unique)} unique")
    return unique
