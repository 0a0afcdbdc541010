"""
Tokenizer for schema text.

Grammar:

    schema    ::= (spaces? token)+
    token     ::= word | reference
    word      ::= letter+
    reference ::= '$' letter+
"""

from textschema.combinators import (
    char,
    choice,
    fmap,
    letters,
    many1,
    parse_all,
    spaces,
    then,
)
from textschema.schema.tokens import REF_MARKER, Reference, Token, Word

p_word = fmap(Word, letters)
p_ref = fmap(Reference, then(char(REF_MARKER), letters))
p_schema = many1(then(spaces, choice(p_word, p_ref)))


def tokenize(text: str) -> list[Token] | None:
    """Parse schema text into tokens.

    The whole text must be consumed; only trailing spaces may remain.

    Returns:
        The token list, or None if the text is not a valid schema (empty,
        no tokens, a bare marker, or any character other than letters,
        spaces and the marker).
    """
    return parse_all(p_schema, text)
