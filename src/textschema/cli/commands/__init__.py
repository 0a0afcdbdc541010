"""CLI commands for textschema."""

from . import schema

__all__ = ["schema"]
