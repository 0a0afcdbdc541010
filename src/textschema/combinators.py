"""
Recognizer combinators.

A recognizer consumes a prefix of its input and returns the produced value
together with the remaining text, or None when it does not match:

    letters("sum of y")  -> ("sum", " of y")
    letters("42")        -> None

Recognizers built here hold no state between calls, so a single instance can
be reused and shared freely.
"""

from collections.abc import Callable
from typing import Any

type Recognizer[T] = Callable[[str], tuple[T, str] | None]


class MatchRejected(Exception):
    """Raised by an action to turn a successful match into a no-match."""

    pass


# --- Primitives ---


def check(predicate: Callable[[str], bool]) -> Recognizer[str]:
    """Match a single character satisfying predicate."""

    def recognize(text: str) -> tuple[str, str] | None:
        if text and predicate(text[0]):
            return text[0], text[1:]
        return None

    return recognize


def char(c: str) -> Recognizer[str]:
    """Match exactly the character c."""
    return check(lambda x: x == c)


def token(literal: str) -> Recognizer[str]:
    """Match the exact literal, case-sensitive."""

    def recognize(text: str) -> tuple[str, str] | None:
        if text.startswith(literal):
            return literal, text[len(literal) :]
        return None

    return recognize


def succeed(value: Any) -> Recognizer[Any]:
    """Consume nothing and return value."""
    return lambda text: (value, text)


# --- Composition ---


def fmap(fn: Callable[[Any], Any], p: Recognizer[Any]) -> Recognizer[Any]:
    """Apply fn to the value produced by p."""

    def recognize(text: str) -> tuple[Any, str] | None:
        result = p(text)
        if result is None:
            return None
        value, rest = result
        return fn(value), rest

    return recognize


def bind(p: Recognizer[Any], fn: Callable[[Any], Recognizer[Any]]) -> Recognizer[Any]:
    """Run p, then the recognizer built from its value."""

    def recognize(text: str) -> tuple[Any, str] | None:
        result = p(text)
        if result is None:
            return None
        value, rest = result
        return fn(value)(rest)

    return recognize


def then(p: Recognizer[Any], q: Recognizer[Any]) -> Recognizer[Any]:
    """Run p then q, keeping q's value."""
    return bind(p, lambda _: q)


def skip(p: Recognizer[Any], q: Recognizer[Any]) -> Recognizer[Any]:
    """Run p then q, keeping p's value."""
    return bind(p, lambda value: fmap(lambda _: value, q))


def sequence(*parsers: Recognizer[Any]) -> Recognizer[list[Any]]:
    """Run every recognizer in order and collect their values."""

    def recognize(text: str) -> tuple[list[Any], str] | None:
        values = []
        for p in parsers:
            result = p(text)
            if result is None:
                return None
            value, text = result
            values.append(value)
        return values, text

    return recognize


def choice(*parsers: Recognizer[Any]) -> Recognizer[Any]:
    """Ordered choice: the first alternative that matches wins."""

    def recognize(text: str) -> tuple[Any, str] | None:
        for p in parsers:
            result = p(text)
            if result is not None:
                return result
        return None

    return recognize


def many(p: Recognizer[Any]) -> Recognizer[list[Any]]:
    """Zero or more repetitions of p.

    Stops as soon as p fails or succeeds without consuming input, so it
    always terminates.
    """

    def recognize(text: str) -> tuple[list[Any], str]:
        values = []
        while True:
            result = p(text)
            if result is None:
                break
            value, rest = result
            if len(rest) == len(text):
                break
            values.append(value)
            text = rest
        return values, text

    return recognize


def many1(p: Recognizer[Any]) -> Recognizer[list[Any]]:
    """One or more repetitions of p."""

    def recognize(text: str) -> tuple[list[Any], str] | None:
        values, rest = many(p)(text)
        if not values:
            return None
        return values, rest

    return recognize


def implode(p: Recognizer[list[str]]) -> Recognizer[str]:
    """Join a list of characters into a string."""
    return fmap("".join, p)


# --- Common recognizers ---


def is_alpha(c: str) -> bool:
    """ASCII letters only."""
    return "a" <= c <= "z" or "A" <= c <= "Z"


alpha = check(is_alpha)
letters = implode(many1(alpha))
spaces = many(char(" "))


def parse_all(p: Recognizer[Any], text: str) -> Any | None:
    """Run p over text, requiring that only spaces remain afterwards."""
    result = p(text)
    if result is None:
        return None
    value, rest = result
    if rest.strip(" "):
        return None
    return value
