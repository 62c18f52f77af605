"""Exception hierarchy for allkit.

Every error raised by allkit derives from :class:`AllkitError`. Each concrete
error also subclasses the builtin that a caller would expect from the
equivalent stdlib operation, so ``except KeyError`` around an attribute
lookup keeps working.

Hierarchy
---------
AllkitError
├── InvalidArgumentsError      (TypeError)
├── AttributeNotFoundError     (KeyError)
└── EnvironmentVariableError   (ValueError)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from allkit.attribute_key import AttributeKey


class AllkitError(Exception):
    """Base exception for all allkit errors."""


class InvalidArgumentsError(AllkitError, TypeError):
    """Raised when an AttributeKey is constructed with ambiguous arguments."""


class AttributeNotFoundError(AllkitError, KeyError):
    """Raised when a required attribute is missing from an Attributes instance."""

    def __init__(self, key: AttributeKey) -> None:
        name = f' "{key.name}"' if key.name else ""
        super().__init__(f"Attribute with key{name} not found")
        self.key = key

    @property
    def name(self) -> str | None:
        return self.key.name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return self.args[0]


class EnvironmentVariableError(AllkitError, ValueError):
    """Raised when an environment variable is missing or cannot be coerced."""

    def __init__(self, variable: str, message: str) -> None:
        super().__init__(message)
        self.variable = variable
