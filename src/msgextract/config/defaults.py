"""
Default node-matching tables.

Function names map to one role per positional argument; component tags map
attribute names to roles. Role values use the gettext spellings accepted by
``Role``.
"""

from __future__ import annotations

from typing import Final

# Filename option value that disables source references for a pass
NO_REFERENCES: Final = "none"

DEFAULT_LANGUAGE: Final = "javascript"

DEFAULT_FUNC_ARGUMENTS_MAP: Final[dict[str, list[str | None]]] = {
    "gettext": ["msgid"],
    "dgettext": [None, "msgid"],
    "ngettext": ["msgid", "msgid_plural"],
    "dngettext": [None, "msgid", "msgid_plural"],
    "pgettext": ["msgctxt", "msgid"],
    "dpgettext": [None, "msgctxt", "msgid"],
    "npgettext": ["msgctxt", "msgid", "msgid_plural"],
    "dnpgettext": [None, "msgctxt", "msgid", "msgid_plural"],
}

DEFAULT_COMPONENT_PROPS_MAP: Final[dict[str, dict[str, str | None]]] = {
    "GetText": {
        "message": "msgid",
        "messagePlural": "msgid_plural",
        "context": "msgctxt",
        "comment": "comment",
    },
}
