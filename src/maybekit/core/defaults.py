"""Fold-to-default helpers for common payload types.

Small shortcuts over :meth:`Maybe.or_` / :meth:`Maybe.or_else` for the
defaults that show up over and over: empty strings, ``None``, booleans and
empty collections.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TypeVar

from .errors import require
from .maybe import Maybe

T = TypeVar("T")
C = TypeVar("C", bound=Collection[object])


def or_empty(subject: Maybe[str]) -> str:
    """Return the string payload, or ``""`` when absent."""
    return subject.or_("")


def or_none(subject: Maybe[T]) -> T | None:
    """Return the payload, or ``None`` when absent."""
    return subject.to_optional()


def or_true(subject: Maybe[bool]) -> bool:
    """Return the boolean payload, or ``True`` when absent."""
    return subject.or_(True)


def or_false(subject: Maybe[bool]) -> bool:
    """Return the boolean payload, or ``False`` when absent."""
    return subject.or_(False)


def or_empty_collection(subject: Maybe[C], factory: Callable[[], C] = list) -> C:  # type: ignore[assignment]
    """Return the collection payload, or a fresh empty one built by ``factory``.

    ``factory`` is called on every absent lookup so callers never share a
    mutable default.
    """
    require(factory, "factory")
    return subject.or_else(factory)


def to_optional(subject: Maybe[T]) -> T | None:
    """Convert a ``Maybe`` into a plain ``T | None``."""
    return subject.to_optional()


__all__ = [
    "or_empty",
    "or_empty_collection",
    "or_false",
    "or_none",
    "or_true",
    "to_optional",
]
