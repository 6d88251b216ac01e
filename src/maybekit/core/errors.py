"""Error taxonomy for maybekit.

Every failure raised by the library is a programming-contract violation and
derives from :class:`MaybeError`. Each concrete error also subclasses the
closest builtin so callers that already catch ``ValueError`` / ``TypeError`` /
``RuntimeError`` keep working.

Absence itself is never an error: it is represented by ``NOTHING``.
"""

from __future__ import annotations

from typing import Any

MORE_THAN_ONE_ELEMENT = "Sequence contains more than one element"
MORE_THAN_ONE_MATCHING_ELEMENT = "Sequence contains more than one matching element"


class MaybeError(Exception):
    """Base class for all maybekit errors."""


class EmptyValueAccess(MaybeError, RuntimeError):
    """Raised when the payload of an absent ``Maybe`` is read."""

    def __init__(self, msg: str = "No value is present") -> None:
        super().__init__(msg)


class InvalidArgument(MaybeError, ValueError):
    """Raised when a required callable argument is ``None``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


class TooManyElements(MaybeError, ValueError):
    """Raised by ``single`` when more than one (matching) element exists."""

    def __init__(self, *, filtered: bool = False) -> None:
        super().__init__(MORE_THAN_ONE_MATCHING_ELEMENT if filtered else MORE_THAN_ONE_ELEMENT)
        self.filtered = filtered


class NotComparable(MaybeError, TypeError):
    """Raised when two payloads have no natural ordering."""

    def __init__(self, left: Any, right: Any) -> None:
        names = sorted({type(left).__name__, type(right).__name__})
        super().__init__(f"At least one object must be orderable: {', '.join(names)}")


def require(value: Any, name: str) -> None:
    """Raise :class:`InvalidArgument` if ``value`` is ``None``."""
    if value is None:
        raise InvalidArgument(name)


__all__ = [
    "MORE_THAN_ONE_ELEMENT",
    "MORE_THAN_ONE_MATCHING_ELEMENT",
    "EmptyValueAccess",
    "InvalidArgument",
    "MaybeError",
    "NotComparable",
    "TooManyElements",
    "require",
]
