"""
msgextract - extract gettext catalog entries from JavaScript/JSX and Python sources.
"""

from .api import (
    expand_globs,
    extract_messages,
    extract_messages_from_file,
    extract_messages_from_files,
    extract_messages_from_glob,
    merge_catalogs,
)
from .config import ConfigManager, ExtractionOptions, Role
from .extraction import CatalogEntry, EntryComments, get_unique_blocks
from .utils.exceptions import (
    ConfigurationError,
    MsgExtractError,
    SourceParseError,
    UnsupportedLanguageError,
)

__version__ = "1.0.0"

__all__ = [
    "CatalogEntry",
    "ConfigManager",
    "ConfigurationError",
    "EntryComments",
    "ExtractionOptions",
    "MsgExtractError",
    "Role",
    "SourceParseError",
    "UnsupportedLanguageError",
    "expand_globs",
    "extract_messages",
    "extract_messages_from_file",
    "extract_messages_from_files",
    "extract_messages_from_glob",
    "get_unique_blocks",
    "merge_catalogs",
]
