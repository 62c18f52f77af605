"""Attributes — an insertion-ordered container of typed attributes.

Values are stored under AttributeKey instances, which compare by identity, so
two keys sharing a name never collide inside a container. Overwriting a key
keeps its position. Deleting and re-inserting moves it to the end.

Traversals (iteration, keys/values/entries, for_each) walk a snapshot taken
when they start. Mutating the container mid-traversal is safe and does not
affect the traversal already in progress.

Not thread-safe: callers sharing an instance across threads must serialize
access themselves.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterator, TypeVar

from allkit.attribute_key import AttributeKey
from allkit.exceptions import AttributeNotFoundError

T = TypeVar("T")

_UNSET = object()


class Attributes:
    """A collection of typed attributes identified by their AttributeKey."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[AttributeKey[Any], Any] = {}

    # --- Write operations ---

    def set(self, key: AttributeKey[T], value: T) -> None:
        """Associate value with key, overwriting any previous value in place."""
        self._data[key] = value

    def delete(self, key: AttributeKey[Any]) -> bool:
        """Remove the attribute for key. Returns True if one existed."""
        if key in self._data:
            del self._data[key]
            return True
        return False

    def clear(self) -> None:
        self._data.clear()

    # --- Read operations ---

    def get(self, key: AttributeKey[T]) -> T | None:
        """Return the value for key, or None when absent.

        A stored None is indistinguishable from absence here; use has() when
        that matters.
        """
        return self._data.get(key)

    def get_or_raise(self, key: AttributeKey[T]) -> T:
        """Return the value for key, raising AttributeNotFoundError when absent."""
        try:
            return self._data[key]
        except KeyError:
            raise AttributeNotFoundError(key) from None

    def get_or_default(self, key: AttributeKey[T], default: T) -> T:
        """Return the value for key, or default when absent.

        The default is handed back as-is and never stored.
        """
        if key in self._data:
            return self._data[key]
        return default

    def get_or_insert(self, key: AttributeKey[T], value: T) -> T:
        """Return the value for key, storing and returning value when absent."""
        if key not in self._data:
            self._data[key] = value
        return self._data[key]

    def get_or_insert_computed(self, key: AttributeKey[T], supplier: Callable[[], T]) -> T:
        """Like get_or_insert, but the value is built lazily.

        supplier is called once per miss and never on a hit.
        """
        if key not in self._data:
            self._data[key] = supplier()
        return self._data[key]

    def has(self, key: AttributeKey[Any]) -> bool:
        return key in self._data

    @property
    def size(self) -> int:
        """The number of attributes in this instance."""
        return len(self._data)

    # --- Traversal ---

    def entries(self) -> Iterator[tuple[AttributeKey[Any], Any]]:
        return iter(list(self._data.items()))

    def keys(self) -> Iterator[AttributeKey[Any]]:
        return iter(list(self._data))

    def values(self) -> Iterator[Any]:
        return iter(list(self._data.values()))

    def for_each(self, callback: Callable[..., object], bind: Any = _UNSET) -> None:
        """Call ``callback(value, key, self)`` for every attribute in order.

        When ``bind`` is given, callback is bound to it first, so it receives
        ``bind`` as its leading argument the way a method receives ``self``.
        Exceptions raised by callback propagate.
        """
        fn = callback if bind is _UNSET else partial(callback, bind)
        for key, value in self.entries():
            fn(value, key, self)

    # --- Serialization ---

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready dict of named attributes.

        Attributes whose key has no name are left out. When two keys share a
        name, the one inserted later wins.
        """
        obj: dict[str, Any] = {}
        for key, value in self._data.items():
            if key.name is None:
                continue
            obj[key.name] = value
        return obj

    # --- Mapping protocol ---

    def __getitem__(self, key: AttributeKey[T]) -> T:
        return self.get_or_raise(key)

    def __setitem__(self, key: AttributeKey[T], value: T) -> None:
        self.set(key, value)

    def __delitem__(self, key: AttributeKey[Any]) -> None:
        if not self.delete(key):
            raise AttributeNotFoundError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[tuple[AttributeKey[Any], Any]]:
        return self.entries()

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._data.items())
        return f"Attributes({{{body}}})"
