"""Shared helpers for schema_reset."""

from .logs import configure_logging

__all__ = ["configure_logging"]
