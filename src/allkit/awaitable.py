"""MaybeAwaitable — a value that may or may not need awaiting.

Useful for hooks that can be implemented either synchronously or as
coroutines:

    def fetch() -> MaybeAwaitable[str]:
        ...

    value = await resolve(fetch())
"""

from __future__ import annotations

import inspect
from typing import Awaitable, TypeVar, Union

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
