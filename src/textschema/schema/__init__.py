"""
Schemas: fixed words interleaved with named placeholders, compiled to recognizers.

A schema such as ``"$expr is the $op of $expr and $expr"`` is tokenized,
its references counted, and compiled with an environment of sub-recognizers
and an action into a single recognizer. Schema files hold one schema per
line and load as an ordered choice.
"""

from textschema.schema.analyzer import analyze
from textschema.schema.captures import Captures, labelled
from textschema.schema.compiler import compile_schema, compile_tokens, schema
from textschema.schema.errors import (
    SchemaError,
    SchemaFileError,
    SchemaSyntaxError,
    UnboundReferenceError,
)
from textschema.schema.lexer import tokenize
from textschema.schema.loader import load_schema_file, load_schemas, read_schema_lines
from textschema.schema.tokens import REF_MARKER, Reference, Word, render_schema

__all__ = [
    # Tokens
    "REF_MARKER",
    "Reference",
    "Word",
    "render_schema",
    # Lexer
    "tokenize",
    # Analyzer
    "analyze",
    # Captures
    "Captures",
    "labelled",
    # Compiler
    "compile_schema",
    "compile_tokens",
    "schema",
    # Loader
    "load_schema_file",
    "load_schemas",
    "read_schema_lines",
    # Errors
    "SchemaError",
    "SchemaFileError",
    "SchemaSyntaxError",
    "UnboundReferenceError",
]
