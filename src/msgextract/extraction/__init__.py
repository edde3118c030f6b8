"""Extraction and deduplication engine."""

from .blocks import CatalogEntry, EntryComments
from .merge import are_blocks_equal, get_unique_blocks, merge_blocks
from .traversal import TraversalContext, traverse

__all__ = [
    "CatalogEntry",
    "EntryComments",
    "TraversalContext",
    "are_blocks_equal",
    "get_unique_blocks",
    "merge_blocks",
    "traverse",
]
