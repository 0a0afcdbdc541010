"""
Token definitions for schemas.
"""

from dataclasses import dataclass

# Prefix marking a reference in schema text; not part of the stored name.
REF_MARKER = "$"


@dataclass(frozen=True)
class Word:
    """Literal word matched verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Reference:
    """Placeholder bound to a named sub-recognizer at compile time."""

    name: str

    def render(self) -> str:
        return f"{REF_MARKER}{self.name}"


type Token = Word | Reference


def render_schema(tokens: list[Token]) -> str:
    """Render tokens back to schema text, separated by single spaces."""
    return " ".join(t.render() for t in tokens)
