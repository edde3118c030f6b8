"""Shared utilities for msgextract."""
