"""
Compile-time exceptions for schemas.

These are author-facing: they are raised while building recognizers, never
while matching input.
"""


class SchemaError(Exception):
    """Base exception for all schema compile-time errors."""

    pass


def _location(resource: str | None, line: int | None) -> str:
    if resource is None:
        return ""
    return f"File '{resource}', line {line if line is not None else 1}: "


class SchemaSyntaxError(SchemaError):
    """Raised when schema text cannot be tokenized."""

    def __init__(self, text: str, resource: str | None = None, line: int | None = None):
        self.text = text
        self.resource = resource
        self.line = line
        super().__init__(f"{_location(resource, line)}unable to parse schema '{text}'")


class UnboundReferenceError(SchemaError):
    """Raised when a schema references a name missing from the environment."""

    def __init__(
        self,
        name: str,
        text: str,
        resource: str | None = None,
        line: int | None = None,
    ):
        self.name = name
        self.text = text
        self.resource = resource
        self.line = line
        super().__init__(
            f"{_location(resource, line)}no recognizer bound to reference "
            f"'${name}' in schema '{text}'"
        )


class SchemaFileError(SchemaError):
    """Raised when a schema resource cannot be opened or read."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"unable to open file '{resource}'")
