"""Reference occurrence analysis."""

from textschema.schema.tokens import Reference, Token


def analyze(tokens: list[Token]) -> tuple[dict[str, int], int]:
    """Count reference occurrences in a token sequence.

    Args:
        tokens: Tokens of one schema.

    Returns:
        (table, total) where table maps each reference name to its number of
        occurrences, in order of first appearance, and total is the number
        of reference tokens across all names.
    """
    table: dict[str, int] = {}
    total = 0
    for tok in tokens:
        if isinstance(tok, Reference):
            table[tok.name] = table.get(tok.name, 0) + 1
            total += 1
    return table, total
