"""Configuration manager for msgextract.

This module loads extraction options from YAML files with Pydantic
validation and resolves the effective options of a traversal pass from
three layers: per-call overrides, process-level ambient options and the
built-in defaults.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.exceptions import ConfigurationError
from .defaults import (
    DEFAULT_COMPONENT_PROPS_MAP,
    DEFAULT_FUNC_ARGUMENTS_MAP,
    DEFAULT_LANGUAGE,
    NO_REFERENCES,
)
from .schema import ExtractionOptions, ResolvedOptions

logger = logging.getLogger(__name__)

OptionsLike = ExtractionOptions | Mapping[str, object]

_DEFAULT_OPTIONS = ExtractionOptions(
    func_arguments_map=DEFAULT_FUNC_ARGUMENTS_MAP,  # pyright: ignore[reportArgumentType]
    component_props_map=DEFAULT_COMPONENT_PROPS_MAP,  # pyright: ignore[reportArgumentType]
    language=DEFAULT_LANGUAGE,
)


def coerce_options(options: OptionsLike | None) -> ExtractionOptions | None:
    """
    Validate a plain mapping into ``ExtractionOptions``.

    Args:
        options: Options model, mapping of option values, or None

    Returns:
        Validated options, or None when none were given

    Raises:
        ConfigurationError: If the mapping fails validation
    """
    if options is None or isinstance(options, ExtractionOptions):
        return options
    try:
        return ExtractionOptions.model_validate(dict(options))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid extraction options: {e}", context=e) from e


def resolve_options(
    overrides: OptionsLike | None = None,
    ambient: OptionsLike | None = None,
) -> ResolvedOptions:
    """
    Resolve the effective options for one traversal pass.

    Precedence is override > ambient > default. Only fields explicitly set
    (and not None) on a layer replace the value from the layer below it;
    maps are replaced as a whole, not merged key by key.

    Args:
        overrides: Per-call options
        ambient: Process-level options, e.g. loaded from a config file

    Returns:
        Immutable resolved options
    """
    merged: dict[str, object] = _DEFAULT_OPTIONS.model_dump()

    for layer in (coerce_options(ambient), coerce_options(overrides)):
        if layer is None:
            continue
        merged.update(layer.model_dump(exclude_unset=True, exclude_none=True))

    return ResolvedOptions.model_validate(merged)


def resolve_reference_filename(filename: str | None, cwd: Path | None = None) -> str | None:
    """
    Resolve the filename used in ``path:line`` references.

    Args:
        filename: Filename option value
        cwd: Working directory to strip (defaults to the current one)

    Returns:
        None when references are suppressed or no filename is known,
        otherwise the filename with a leading working directory removed
    """
    if not filename or filename == NO_REFERENCES:
        return None

    base = str(cwd if cwd is not None else Path.cwd()).rstrip(os.sep) + os.sep
    if filename.startswith(base):
        return filename[len(base):]
    return filename


class ConfigManager:
    """
    Configuration manager holding the process-level ambient options.

    Ambient options sit between per-call overrides and the built-in
    defaults during option resolution.
    """

    def __init__(self, ambient: OptionsLike | None = None) -> None:
        """Initialize the configuration manager."""
        self._ambient: ExtractionOptions | None = coerce_options(ambient)
        self._config_file_path: Path | None = None

    @property
    def ambient(self) -> ExtractionOptions | None:
        """Currently configured ambient options."""
        return self._ambient

    @property
    def config_file_path(self) -> Path | None:
        """Path of the last loaded configuration file."""
        return self._config_file_path

    def set_ambient(self, options: OptionsLike | None) -> None:
        """Replace the ambient options."""
        self._ambient = coerce_options(options)

    def load_ambient(self, config_path: Path) -> ExtractionOptions:
        """
        Load a configuration file and use it as the ambient options.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            The loaded options
        """
        options = self.load_config(config_path)
        self._ambient = options
        self._config_file_path = config_path
        logger.info(f"Loaded extraction options from {config_path}")
        return options

    def resolve(self, overrides: OptionsLike | None = None) -> ResolvedOptions:
        """Resolve per-call overrides against the ambient options."""
        return resolve_options(overrides, self._ambient)

    @staticmethod
    def load_config(config_path: Path) -> ExtractionOptions:
        """
        Load and validate extraction options from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExtractionOptions: Validated options

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ConfigurationError: If the YAML is invalid or fails validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        try:
            return ExtractionOptions.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}", context=e
            ) from e
