"""Runtime class introspection helpers.

    class_of([])                  # <class 'list'>
    superclasses_of_type(bool)    # [<class 'int'>, <class 'object'>]
"""

from __future__ import annotations

from typing import Any


def class_of(value: Any) -> type | None:
    """Return the class of value, or None for None."""
    if value is None:
        return None
    return type(value)


def superclasses_of_type(cls: type) -> list[type]:
    """Return every ancestor of cls in MRO order.

    cls itself is excluded; ``object`` is always present and always last.
    """
    superclasses = [base for base in cls.__mro__[1:] if base is not object]
    superclasses.append(object)
    return superclasses
