"""Option schema for msgextract using Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Catalog entry field an argument or attribute is mapped to."""

    ID = "id"
    PLURAL_ID = "plural_id"
    CONTEXT = "context"
    COMMENT = "comment"
    IGNORE = "ignore"


# gettext spellings accepted in configuration
_ROLE_ALIASES: dict[str, Role] = {
    "msgid": Role.ID,
    "msgid_plural": Role.PLURAL_ID,
    "msgctxt": Role.CONTEXT,
}

Language = Literal["javascript", "python"]


def normalize_role(value: object) -> Role:
    """
    Normalize a configured role value.

    Args:
        value: Role name, gettext alias, ``Role`` member or ``None``

    Returns:
        The matching ``Role``; ``None`` maps to ``Role.IGNORE``

    Raises:
        ValueError: If the value names no known role
    """
    match value:
        case None:
            return Role.IGNORE
        case Role():
            return value
        case str() if value in _ROLE_ALIASES:
            return _ROLE_ALIASES[value]
        case str():
            try:
                return Role(value)
            except ValueError:
                raise ValueError(f"Unknown role: {value!r}") from None
        case _:
            raise ValueError(f"Role must be a string or null, got {type(value).__name__}")


class ExtractionOptions(BaseModel):
    """
    Caller-supplied extraction options.

    Every field is optional so that an unset field can fall through to the
    next layer during resolution.
    """

    model_config = ConfigDict(extra="forbid")

    filename: str | None = Field(
        default=None,
        description="Source path used for references, or 'none' to suppress references",
    )
    func_arguments_map: dict[str, list[Role]] | None = Field(
        default=None,
        description="Call name to positional argument roles",
    )
    component_props_map: dict[str, dict[str, Role]] | None = Field(
        default=None,
        description="Element tag name to attribute roles",
    )
    language: Language | None = Field(
        default=None,
        description="Source language of the parsed text",
    )

    @field_validator("func_arguments_map", mode="before")
    @classmethod
    def normalize_func_roles(cls, v: object) -> object:
        """Accept gettext aliases and nulls in argument role lists."""
        if not isinstance(v, dict):
            return v
        normalized: dict[object, object] = {}
        for name, roles in v.items():  # pyright: ignore[reportUnknownVariableType]
            if not isinstance(roles, (list, tuple)):
                raise ValueError(f"Roles for function {name!r} must be a list")
            normalized[name] = [normalize_role(role) for role in roles]  # pyright: ignore[reportUnknownVariableType]
        return normalized

    @field_validator("component_props_map", mode="before")
    @classmethod
    def normalize_prop_roles(cls, v: object) -> object:
        """Accept gettext aliases and nulls in component prop mappings."""
        if not isinstance(v, dict):
            return v
        normalized: dict[object, object] = {}
        for tag, props in v.items():  # pyright: ignore[reportUnknownVariableType]
            if not isinstance(props, dict):
                raise ValueError(f"Props for component {tag!r} must be a mapping")
            normalized[tag] = {
                prop: normalize_role(role)
                for prop, role in props.items()  # pyright: ignore[reportUnknownVariableType]
            }
        return normalized


class ResolvedOptions(BaseModel):
    """Effective options for one traversal pass."""

    model_config = ConfigDict(frozen=True)

    filename: str | None
    func_arguments_map: dict[str, tuple[Role, ...]]
    component_props_map: dict[str, dict[str, Role]]
    language: Language
