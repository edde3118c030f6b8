"""
Deduplication of catalog entries.

Entries sharing an ``(id, context)`` key collapse into the first-seen slot.
Translator comments and source references are unioned; the plural form of
the latest entry carrying one wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from .blocks import CatalogEntry, EntryComments, ordered_union

logger = logging.getLogger(__name__)


def sorted_references(*groups: Iterable[str]) -> tuple[str, ...]:
    """Union of reference groups, sorted."""
    return tuple(sorted(ordered_union(*groups)))


def are_blocks_equal(a: CatalogEntry, b: CatalogEntry) -> bool:
    """Return whether two entries occupy the same catalog slot."""
    return a.id == b.id and a.context == b.context


def merge_blocks(existing: CatalogEntry, incoming: CatalogEntry) -> CatalogEntry:
    """
    Merge a duplicate entry into the canonical one.

    Args:
        existing: Canonical entry already in the result
        incoming: Later entry with the same key

    Returns:
        A new canonical entry
    """
    comments = EntryComments(
        extracted=ordered_union(existing.comments.extracted, incoming.comments.extracted),
        reference=sorted_references(existing.comments.reference, incoming.comments.reference),
    )
    merged = replace(existing, comments=comments)

    if incoming.plural_id is not None:
        merged = replace(
            merged,
            plural_id=incoming.plural_id,
            translations=incoming.translations,
        )

    return merged


def get_unique_blocks(blocks: Iterable[CatalogEntry]) -> list[CatalogEntry]:
    """
    Reduce raw entries to one entry per ``(id, context)`` key.

    Entries with a null or blank id are dropped. The result keeps the
    first-seen order of each key; merging a deduplicated list again
    returns it unchanged.

    Args:
        blocks: Raw entries in discovery order

    Returns:
        New list of unique entries
    """
    unique: list[CatalogEntry] = []
    positions: dict[tuple[str | None, str], int] = {}
    dropped = 0

    for block in blocks:
        if not block.is_eligible:
            dropped += 1
            continue

        index = positions.get(block.key)
        if index is None:
            positions[block.key] = len(unique)
            references = sorted_references(block.comments.reference)
            if references != block.comments.reference:
                block = replace(block, comments=replace(block.comments, reference=references))
            unique.append(block)
        else:
            unique[index] = merge_blocks(unique[index], block)

    if dropped:
        logger.debug(f"Dropped {dropped} entries without a usable id")

    return unique
