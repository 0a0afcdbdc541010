"""Captured reference values handed to schema actions.

Each reference occurrence in a schema owns one capture slot identified by
``(name, index)``, where ``index`` is the 1-based rank of that occurrence
among the occurrences of ``name``, counted left to right. For
``"$expr is the $op of $expr and $expr"`` the slots are::

    ("expr", 1) ("op", 1) ("expr", 2) ("expr", 3)
"""

from collections.abc import Callable, Iterator, Mapping
from functools import wraps
from typing import Any

type Slot = tuple[str, int]


class Captures(Mapping[Slot, Any]):
    """Immutable mapping from capture slot to captured value.

    Iteration is grouped by reference name, names in order of first
    appearance in the schema, then by occurrence index.
    """

    __slots__ = ("_values",)

    def __init__(self, table: dict[str, int], values: dict[Slot, Any]):
        # table is the occurrence table of the schema, in first-appearance order
        self._values = {(name, i): values[name, i] for name, n in table.items() for i in range(1, n + 1)}

    def __getitem__(self, slot: Slot) -> Any:
        return self._values[slot]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}{i}={value!r}" for (name, i), value in self._values.items())
        return f"Captures({inner})"

    def values_of(self, name: str) -> list[Any]:
        """All values captured for name, in occurrence order."""
        return [value for (n, _), value in self._values.items() if n == name]

    def as_kwargs(self) -> dict[str, Any]:
        """Values keyed by name followed by occurrence index, e.g. ``expr2``."""
        return {f"{name}{i}": value for (name, i), value in self._values.items()}


def labelled(fn: Callable[..., Any]) -> Callable[[Captures], Any]:
    """Adapt a function taking keyword arguments (``expr1=...``) into an action.

    Example:
        >>> action = labelled(lambda expr1, op1, **_: (op1, expr1))
    """

    @wraps(fn)
    def action(captures: Captures) -> Any:
        return fn(**captures.as_kwargs())

    return action
