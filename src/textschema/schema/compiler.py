"""
Schema compiler.

Turns a schema into a recognizer. Given sub-recognizers for the references
and an action combining their values:

    env = {"expr": letters, "op": letters}
    rule = compile_schema("$expr is the $op of $expr and $expr", env,
                          lambda c: (c["op", 1], c["expr", 1], c["expr", 2]))
    rule("x is the sum of y and z")  -> (("sum", "x", "y"), "")

Each token may be preceded by any number of spaces in the input, whether or
not the schema text shows one.
"""

from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from textschema.combinators import MatchRejected, Recognizer, spaces, then, token
from textschema.schema.analyzer import analyze
from textschema.schema.captures import Captures, Slot
from textschema.schema.errors import SchemaSyntaxError, UnboundReferenceError
from textschema.schema.lexer import tokenize
from textschema.schema.tokens import Reference, Token, Word, render_schema

type Env = Mapping[str, Recognizer[Any]]
type Action = Callable[[Captures], Any]


def compile_tokens(
    tokens: list[Token],
    env: Env,
    action: Action,
    *,
    resource: str | None = None,
    line: int | None = None,
) -> Recognizer[Any]:
    """Build a recognizer matching the tokens in sequence.

    Args:
        tokens: Parsed schema, at least one token.
        env: Sub-recognizer for every reference name in the schema.
        action: Called once per full match with the captured values; its
            return value is the result of the recognizer. It may raise
            MatchRejected to turn the match into a no-match.
        resource: Name of the originating resource, for diagnostics.
        line: 1-based line number in the resource, for diagnostics.

    Raises:
        UnboundReferenceError: If a reference name is missing from env.
    """
    table, total = analyze(tokens)

    # Assign each reference occurrence its (name, index) slot, left to right
    seen: dict[str, int] = {}
    steps: list[tuple[Slot | None, Recognizer[Any]]] = []
    for tok in tokens:
        match tok:
            case Word(text=text):
                steps.append((None, then(spaces, token(text))))
            case Reference(name=name):
                if name not in env:
                    raise UnboundReferenceError(name, render_schema(tokens), resource, line)
                seen[name] = seen.get(name, 0) + 1
                steps.append(((name, seen[name]), then(spaces, env[name])))

    logger.debug(
        f"Compiled schema {render_schema(tokens)!r}: "
        f"{len(tokens)} tokens, {total} references over {len(table)} names"
    )

    def recognize(text: str) -> tuple[Any, str] | None:
        values: dict[Slot, Any] = {}
        for slot, step in steps:
            result = step(text)
            if result is None:
                return None
            value, text = result
            if slot is not None:
                values[slot] = value
        try:
            return action(Captures(table, values)), text
        except MatchRejected:
            return None

    return recognize


def compile_schema(
    text: str,
    env: Env,
    action: Action,
    *,
    resource: str | None = None,
    line: int | None = None,
) -> Recognizer[Any]:
    """Tokenize schema text and compile it.

    Raises:
        SchemaSyntaxError: If the text is not a valid schema.
        UnboundReferenceError: If a reference name is missing from env.
    """
    tokens = tokenize(text)
    if tokens is None:
        raise SchemaSyntaxError(text, resource, line)
    return compile_tokens(tokens, env, action, resource=resource, line=line)


def schema(text: str, env: Env) -> Callable[[Action], Recognizer[Any]]:
    """Decorator compiling a schema around the decorated action.

    Example:
        @schema("$expr is the $op of $expr and $expr", env)
        def declaration(c):
            return c["op", 1], c["expr", 1], c["expr", 2]

        declaration("x is the sum of y and z")
    """

    def decorator(action: Action) -> Recognizer[Any]:
        return compile_schema(text, env, action)

    return decorator
