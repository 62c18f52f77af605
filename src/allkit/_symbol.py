"""Identity symbols — the unforgeable half of an AttributeKey.

Every AttributeKey owns exactly one Symbol, minted at construction. A Symbol
compares and hashes by object identity only, so no two are ever equal and none
can be reconstructed from its description.
"""

from __future__ import annotations


class Symbol:
    """An opaque, process-unique identity value."""

    __slots__ = ("_description", "__weakref__")

    def __init__(self, description: str | None = None) -> None:
        object.__setattr__(self, "_description", description)

    @property
    def description(self) -> str | None:
        return self._description

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo: dict) -> Symbol:
        return self

    def __reduce__(self):
        raise TypeError("Symbol cannot be pickled; identity does not survive a process")

    def __repr__(self) -> str:
        return f"Symbol({self._description or ''})"


def new_symbol(description: str | None = None) -> Symbol:
    return Symbol(description)
