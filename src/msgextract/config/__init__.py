"""Extraction options, defaults and option resolution."""

from .defaults import (
    DEFAULT_COMPONENT_PROPS_MAP,
    DEFAULT_FUNC_ARGUMENTS_MAP,
    NO_REFERENCES,
)
from .manager import ConfigManager, resolve_options, resolve_reference_filename
from .schema import ExtractionOptions, ResolvedOptions, Role

__all__ = [
    "DEFAULT_COMPONENT_PROPS_MAP",
    "DEFAULT_FUNC_ARGUMENTS_MAP",
    "NO_REFERENCES",
    "ConfigManager",
    "ExtractionOptions",
    "ResolvedOptions",
    "Role",
    "resolve_options",
    "resolve_reference_filename",
]
