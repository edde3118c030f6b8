"""
POT template generation for extracted catalog entries.

Usage Examples:
    >>> from pathlib import Path
    >>> from msgextract import extract_messages
    >>> from msgextract.catalog import output_pot, to_pot
    >>> pot = to_pot(extract_messages('gettext("Hello")'))
    >>> _ = output_pot(pot, Path("locale/messages.pot"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import polib

from ..extraction.blocks import CatalogEntry

logger = logging.getLogger(__name__)

POT_METADATA: dict[str, str] = {
    "Content-Type": "text/plain; charset=UTF-8",
    "Content-Transfer-Encoding": "8bit",
    "Plural-Forms": "nplurals=2; plural=(n!=1);",
}


def parse_reference(reference: str) -> tuple[str, str]:
    """Split a ``path:line`` reference into a polib occurrence."""
    path, separator, line = reference.rpartition(":")
    if not separator or not line.isdigit():
        return (reference, "")
    return (path, line)


def to_po_entry(entry: CatalogEntry) -> polib.POEntry:
    """
    Convert a catalog entry into a polib entry.

    Args:
        entry: Entry with a non-blank id

    Returns:
        The polib entry
    """
    po_entry = polib.POEntry(
        msgid=entry.id or "",
        comment="\n".join(entry.comments.extracted),
        occurrences=[parse_reference(ref) for ref in entry.comments.reference],
    )
    if entry.context:
        po_entry.msgctxt = entry.context
    if entry.plural_id is not None:
        po_entry.msgid_plural = entry.plural_id
        po_entry.msgstr_plural = dict(enumerate(entry.translations))
    else:
        po_entry.msgstr = entry.translations[0] if entry.translations else ""
    return po_entry


def to_pot(entries: Iterable[CatalogEntry]) -> polib.POFile:
    """
    Build a POT template from catalog entries.

    Args:
        entries: Deduplicated entries

    Returns:
        polib file with header metadata and one entry per catalog entry
    """
    pot = polib.POFile()
    pot.metadata = dict(POT_METADATA)
    for entry in entries:
        pot.append(to_po_entry(entry))
    return pot


def output_pot(pot: polib.POFile, output: Path | None = None) -> str:
    """
    Render a POT template and optionally write it to disk.

    Args:
        pot: Template to render
        output: Destination file; parent directories are created

    Returns:
        The rendered template text
    """
    content = str(pot)
    if output is not None:
        _ = output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as file:
            _ = file.write(content)
        logger.info(f"Generated .pot file with {len(pot)} entries: {output}")
    return content
