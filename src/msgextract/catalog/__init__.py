"""Serialization of catalog entries."""

from .pot import output_pot, to_pot

__all__ = ["output_pot", "to_pot"]
