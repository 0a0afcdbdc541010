"""Main CLI entry point for textschema."""  # pragma: no cover

from textschema.cli.app import app  # pragma: no cover

# Register commands
from textschema.cli.commands import schema  # noqa: F401  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
