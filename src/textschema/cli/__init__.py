"""Command line interface for textschema."""
