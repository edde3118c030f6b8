"""Tests for catalog entry construction."""

from __future__ import annotations

from collections.abc import Callable

from msgextract.config.schema import Role
from msgextract.extraction.blocks import (
    CatalogEntry,
    EntryComments,
    block_from_call,
    block_from_component,
    empty_block,
    with_reference,
    with_text_id,
)
from msgextract.extraction.nodes import (
    Attribute,
    CallNode,
    DynamicValue,
    ElementNode,
    NameRef,
    StringLiteral,
)


class TestEmptyBlock:
    """Test the initial entry state."""

    def test_defaults(self) -> None:
        block = empty_block()
        assert block.context == ""
        assert block.id is None
        assert block.plural_id is None
        assert block.translations == ("",)
        assert block.comments == EntryComments()
        assert not block.is_eligible


class TestBlockFromCall:
    """Test building entries from call arguments."""

    def test_single_id(self, make_call: Callable[..., CallNode]) -> None:
        block = block_from_call([Role.ID], make_call("t", "Hello"))
        assert block == CatalogEntry(id="Hello")

    def test_plural_sets_two_translation_slots(self, make_call: Callable[..., CallNode]) -> None:
        block = block_from_call([Role.ID, Role.PLURAL_ID], make_call("nt", "One item", "%d items"))
        assert block.id == "One item"
        assert block.plural_id == "%d items"
        assert block.translations == ("", "")

    def test_context_and_ignored_arguments(self, make_call: Callable[..., CallNode]) -> None:
        roles = [Role.IGNORE, Role.CONTEXT, Role.ID]
        block = block_from_call(roles, make_call("dpgettext", "domain", "menu", "Open"))
        assert block.context == "menu"
        assert block.id == "Open"

    def test_comment_argument_is_extracted(self, make_call: Callable[..., CallNode]) -> None:
        block = block_from_call([Role.ID, Role.COMMENT], make_call("t", "Save", "Button label"))
        assert block.comments.extracted == ("Button label",)

    def test_missing_arguments_leave_fields_unset(self, make_call: Callable[..., CallNode]) -> None:
        block = block_from_call([Role.ID, Role.PLURAL_ID], make_call("ngettext", "Only one"))
        assert block.id == "Only one"
        assert block.plural_id is None
        assert block.translations == ("",)

    def test_extra_arguments_are_ignored(self, make_call: Callable[..., CallNode]) -> None:
        block = block_from_call([Role.ID], make_call("t", "Hello", "unused"))
        assert block == CatalogEntry(id="Hello")

    def test_dynamic_argument_is_not_an_error(self) -> None:
        node = CallNode(NameRef("t"), (DynamicValue(), StringLiteral("%d items")), 1)
        block = block_from_call([Role.ID, Role.PLURAL_ID], node)
        assert block.id is None
        assert block.plural_id == "%d items"


class TestBlockFromComponent:
    """Test building entries from element attributes."""

    PROPS: dict[str, Role] = {
        "message": Role.ID,
        "messagePlural": Role.PLURAL_ID,
        "context": Role.CONTEXT,
        "comment": Role.COMMENT,
    }

    def test_message_and_comment(self, make_element: Callable[..., ElementNode]) -> None:
        element = make_element("T", message="Hi", comment="greeting")
        block = block_from_component(self.PROPS, element)
        assert block.id == "Hi"
        assert block.comments.extracted == ("greeting",)

    def test_unmapped_attributes_are_ignored(self, make_element: Callable[..., ElementNode]) -> None:
        element = make_element("T", message="Hi", className="label")
        assert block_from_component(self.PROPS, element) == CatalogEntry(id="Hi")

    def test_plural_and_context(self, make_element: Callable[..., ElementNode]) -> None:
        element = make_element("T", message="File", messagePlural="Files", context="menu")
        block = block_from_component(self.PROPS, element)
        assert block.plural_id == "Files"
        assert block.context == "menu"
        assert block.translations == ("", "")

    def test_boolean_and_dynamic_attributes(self) -> None:
        element = ElementNode(
            "T",
            (Attribute("message", None), Attribute("comment", DynamicValue())),
            1,
        )
        assert block_from_component(self.PROPS, element) == empty_block()


class TestOverrides:
    """Test text id override and reference attachment."""

    def test_text_id_wins_over_attribute(self, make_element: Callable[..., ElementNode]) -> None:
        block = block_from_component({"message": Role.ID}, make_element("T", message="Attr"))
        assert with_text_id(block, "Text").id == "Text"
        assert block.id == "Attr"

    def test_reference(self) -> None:
        block = with_reference(CatalogEntry(id="Hi"), "src/app.js", 12)
        assert block.comments.reference == ("src/app.js:12",)


class TestToDict:
    """Test plain data rendering."""

    def test_singular_entry_omits_plural(self) -> None:
        data = CatalogEntry(id="Hi").to_dict()
        assert data == {
            "context": "",
            "id": "Hi",
            "translations": [""],
            "comments": {"extracted": [], "reference": []},
        }

    def test_plural_entry(self) -> None:
        entry = CatalogEntry(id="One", plural_id="Many", translations=("", ""))
        data = entry.to_dict()
        assert data["plural_id"] == "Many"
        assert data["translations"] == ["", ""]
