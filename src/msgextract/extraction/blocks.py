"""
Catalog entries and the builders that create them from matched nodes.

Entries are immutable; every builder step returns a new value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace

from ..config.schema import Role
from .classifier import extract_static_string
from .nodes import CallNode, ElementNode

SINGULAR_TRANSLATIONS: tuple[str, ...] = ("",)
PLURAL_TRANSLATIONS: tuple[str, ...] = ("", "")


def ordered_union(*groups: Iterable[str]) -> tuple[str, ...]:
    """Union of string groups keeping first-seen order."""
    return tuple(dict.fromkeys(item for group in groups for item in group))


@dataclass(frozen=True, slots=True)
class EntryComments:
    """Translator comments and source references of an entry."""

    extracted: tuple[str, ...] = ()
    reference: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One translatable string discovered in source code."""

    context: str = ""
    id: str | None = None
    plural_id: str | None = None
    translations: tuple[str, ...] = SINGULAR_TRANSLATIONS
    comments: EntryComments = field(default_factory=EntryComments)

    @property
    def key(self) -> tuple[str | None, str]:
        """Catalog slot identity: ``(id, context)``."""
        return (self.id, self.context)

    @property
    def is_eligible(self) -> bool:
        """Whether the entry has a non-blank id."""
        return self.id is not None and self.id.strip() != ""

    def to_dict(self) -> dict[str, object]:
        """Render the entry as plain data; ``plural_id`` only when present."""
        data: dict[str, object] = {
            "context": self.context,
            "id": self.id,
            "translations": list(self.translations),
            "comments": {
                "extracted": list(self.comments.extracted),
                "reference": list(self.comments.reference),
            },
        }
        if self.plural_id is not None:
            data["plural_id"] = self.plural_id
        return data


def empty_block() -> CatalogEntry:
    """Create an entry with nothing determined yet."""
    return CatalogEntry()


def assign_role(block: CatalogEntry, role: Role, value: str | None) -> CatalogEntry:
    """
    Assign a resolved value to the entry field matching ``role``.

    Unresolved values leave the entry unchanged.

    Args:
        block: Entry to update
        role: Role of the value
        value: Resolved static string, or None

    Returns:
        The updated entry
    """
    if value is None:
        return block

    match role:
        case Role.ID:
            return replace(block, id=value)
        case Role.PLURAL_ID:
            return replace(block, plural_id=value, translations=PLURAL_TRANSLATIONS)
        case Role.CONTEXT:
            return replace(block, context=value)
        case Role.COMMENT:
            comments = replace(
                block.comments,
                extracted=ordered_union(block.comments.extracted, (value,)),
            )
            return replace(block, comments=comments)
        case Role.IGNORE:
            return block


def block_from_call(roles: Sequence[Role], node: CallNode) -> CatalogEntry:
    """
    Build an entry from a recognized call.

    Args:
        roles: Roles of the call's positional arguments
        node: Call node descriptor

    Returns:
        Entry populated from the statically resolvable arguments
    """
    block = empty_block()
    for role, argument in zip(roles, node.arguments):
        block = assign_role(block, role, extract_static_string(argument))
    return block


def block_from_component(props: Mapping[str, Role], node: ElementNode) -> CatalogEntry:
    """
    Build an entry from a recognized element's attributes.

    Args:
        props: Attribute name to role mapping of the element's tag
        node: Opening tag descriptor

    Returns:
        Entry populated from the mapped attributes
    """
    block = empty_block()
    for attribute in node.attributes:
        role = props.get(attribute.name)
        if role is None:
            continue
        block = assign_role(block, role, extract_static_string(attribute.value))
    return block


def with_text_id(block: CatalogEntry, text: str) -> CatalogEntry:
    """Replace the entry id with element text content."""
    return replace(block, id=text)


def with_reference(block: CatalogEntry, filename: str, line: int) -> CatalogEntry:
    """Attach a single ``filename:line`` source reference."""
    return replace(block, comments=replace(block.comments, reference=(f"{filename}:{line}",)))
