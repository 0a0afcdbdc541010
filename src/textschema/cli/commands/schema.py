"""Schema file CLI commands.

`textschema check FILE` compiles a schema file and lists its schemas;
`textschema match FILE TEXT` tries a text against it. References are bound
to runs of letters, so any file can be checked without writing code.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from textschema.cli.app import app
from textschema.combinators import letters
from textschema.config import get_config
from textschema.schema import (
    Captures,
    Reference,
    SchemaError,
    analyze,
    load_schemas,
    read_schema_lines,
    render_schema,
    tokenize,
)

console = Console()


def _letters_env(lines: list[str]) -> dict:
    """Bind every reference found in lines to a run of letters."""
    env = {}
    for line in lines:
        for tok in tokenize(line.strip()) or []:
            if isinstance(tok, Reference):
                env[tok.name] = letters
    return env


def _load(path: Path, action):
    config = get_config()
    try:
        lines = read_schema_lines(path, config.encoding)
        recognizer = load_schemas(
            lines,
            _letters_env(lines),
            action,
            resource=str(path),
            skip_blank_lines=config.skip_blank_lines,
        )
    except SchemaError as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    return lines, recognizer


@app.command()
def check(
    path: Annotated[Path, typer.Argument(help="Schema file, one schema per line")],
) -> None:
    """Compile a schema file and list its schemas."""
    lines, _ = _load(path, lambda c: c)

    table = Table(title=f"Schemas: {path}")
    table.add_column("Line", justify="right")
    table.add_column("Schema", style="cyan")
    table.add_column("Tokens", justify="right")
    table.add_column("References")

    count = 0
    for lno, line in enumerate(lines, start=1):
        tokens = tokenize(line.strip())
        if tokens is None:
            continue
        refs, _ = analyze(tokens)
        table.add_row(
            str(lno),
            render_schema(tokens),
            str(len(tokens)),
            ", ".join(f"{name} x{n}" for name, n in refs.items()),
        )
        count += 1

    console.print(table)
    console.print(f"\n{count} schemas compiled")


@app.command()
def match(
    path: Annotated[Path, typer.Argument(help="Schema file, one schema per line")],
    text: Annotated[str, typer.Argument(help="Text to match")],
) -> None:
    """Match text against a schema file; the first matching schema wins."""
    _, recognizer = _load(path, lambda c: c)

    result = recognizer(text)
    if result is None:
        console.print("[yellow]No schema matched[/yellow]")
        raise typer.Exit(1)

    captures: Captures = result[0]
    table = Table(title="Captures")
    table.add_column("Reference", style="cyan")
    table.add_column("Occurrence", justify="right")
    table.add_column("Value")
    for (name, index), value in captures.items():
        table.add_row(name, str(index), str(value))

    console.print(table)
    console.print(f"Remaining: {result[1]!r}")
