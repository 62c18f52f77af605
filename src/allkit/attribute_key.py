"""AttributeKey — typed identity for a single attribute.

A key is a frozen handle holding a freshly minted Symbol and an optional name.
Keys compare by identity: two keys built with the same name are different
keys. The type parameter exists for type checkers only; nothing at runtime
looks at it.

    Name = AttributeKey("name", str)      # AttributeKey[str]
    Age = AttributeKey[int]("age")        # AttributeKey[int]
    Session = AttributeKey(Session)       # anonymous, AttributeKey[Session]

Keys are meant to be created once, usually as module-level constants, and
shared across any number of Attributes instances.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, overload

from allkit._symbol import Symbol, new_symbol
from allkit.exceptions import InvalidArgumentsError

T = TypeVar("T")


class AttributeKey(Generic[T]):
    """Uniquely identifies a type-safe attribute in an Attributes instance."""

    __slots__ = ("_identity", "_name", "__weakref__")

    @overload
    def __init__(self) -> None: ...

    @overload
    def __init__(self, name: str, /) -> None: ...

    @overload
    def __init__(self, witness: Callable[..., T], /) -> None: ...

    @overload
    def __init__(self, name: str, witness: Callable[..., T], /) -> None: ...

    @overload
    def __init__(self, witness: Callable[..., T], name: str, /) -> None: ...

    def __init__(self, arg1: Any = None, arg2: Any = None, /) -> None:
        if isinstance(arg1, str) and isinstance(arg2, str):
            raise InvalidArgumentsError("AttributeKey cannot have two names")

        # Whichever argument is not the name is a type witness and is dropped.
        if isinstance(arg1, str):
            name = arg1
        elif isinstance(arg2, str):
            name = arg2
        else:
            name = None

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_identity", new_symbol(name))

    # --- Named constructors ---

    @classmethod
    def anonymous(cls) -> AttributeKey[Any]:
        return cls()

    @classmethod
    def named(cls, name: str) -> AttributeKey[Any]:
        return cls(name)

    @classmethod
    def typed(cls, witness: Callable[..., T], name: str | None = None) -> AttributeKey[T]:
        """Build a key whose value type is inferred from ``witness``.

        ``witness`` is never called or stored; it only informs the type checker.
        """
        if name is None:
            return cls(witness)
        return cls(name, witness)

    # --- Read-only state ---

    @property
    def identity(self) -> Symbol:
        """The unforgeable symbol this key is compared and hashed by."""
        return self._identity

    @property
    def name(self) -> str | None:
        """Optional descriptive name, used for diagnostics and serialization."""
        return self._name

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"cannot assign to {name!r}: AttributeKey is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete {name!r}: AttributeKey is immutable")

    # --- Identity semantics ---

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self._identity)

    def __copy__(self) -> AttributeKey[T]:
        return self

    def __deepcopy__(self, memo: dict) -> AttributeKey[T]:
        return self

    def __str__(self) -> str:
        return f"AttributeKey({self._name or ''})"

    def __repr__(self) -> str:
        if self._name is None:
            return "AttributeKey()"
        return f"AttributeKey({self._name!r})"
