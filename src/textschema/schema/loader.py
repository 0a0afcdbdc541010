"""
Loading schema sets.

A schema set is a sequence of schema lines compiled against one environment
and action, combined by ordered choice: the first schema that matches, in
line order, wins.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from textschema.combinators import Recognizer, choice
from textschema.config import TextSchemaConfig, get_config
from textschema.schema.compiler import Action, Env, compile_schema
from textschema.schema.errors import SchemaError, SchemaFileError


def load_schemas(
    lines: Iterable[str],
    env: Env,
    action: Action,
    *,
    resource: str | None = None,
    skip_blank_lines: bool = True,
) -> Recognizer[Any]:
    """Compile each line as a schema and combine them by ordered choice.

    Lines are trimmed before compiling. Line numbers in diagnostics are
    1-based positions in lines, counting skipped blank lines.

    Args:
        lines: Schema lines, in priority order.
        env: Sub-recognizers shared by every schema.
        action: Action shared by every schema.
        resource: Name of the source of lines, for diagnostics.
        skip_blank_lines: Ignore blank lines; otherwise they are syntax errors.

    Raises:
        SchemaSyntaxError: If a line is not a valid schema.
        UnboundReferenceError: If a line references a name missing from env.
    """
    name = resource or "<lines>"
    compiled = []
    for lno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text and skip_blank_lines:
            logger.debug(f"Skipping blank line {lno} of {name}")
            continue
        try:
            compiled.append(compile_schema(text, env, action, resource=name, line=lno))
        except SchemaError as e:
            logger.error(str(e))
            raise

    logger.info(f"Loaded {len(compiled)} schemas from {name}")
    return choice(*compiled)


def read_schema_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read all lines of a schema resource.

    Raises:
        SchemaFileError: If the resource cannot be opened or decoded.
    """
    try:
        with Path(path).open(encoding=encoding) as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read schema file {path}: {e}")
        raise SchemaFileError(str(path)) from e


def load_schema_file(
    path: str | Path,
    env: Env,
    action: Action,
    *,
    config: TextSchemaConfig | None = None,
) -> Recognizer[Any]:
    """Read a schema file and load it as a schema set.

    The file is read in full before any schema is compiled.

    Raises:
        SchemaFileError: If the file cannot be read.
        SchemaSyntaxError: If a line is not a valid schema.
        UnboundReferenceError: If a line references a name missing from env.
    """
    config = config or get_config()
    lines = read_schema_lines(path, config.encoding)
    return load_schemas(
        lines,
        env,
        action,
        resource=str(path),
        skip_blank_lines=config.skip_blank_lines,
    )
