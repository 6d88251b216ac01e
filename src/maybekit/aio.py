"""Async counterparts of the ``Maybe`` combinators.

Presence/absence semantics are identical to the synchronous methods on
:class:`~maybekit.core.maybe.Maybe`; the only difference is that the
selector / predicate / consumer returns an awaitable which is awaited here.
Callable arguments are validated before anything is awaited, and errors from
the awaited operation propagate unchanged.

Example
-------
>>> import asyncio
>>> from maybekit.core.maybe import maybe
>>> async def fetch(n: int) -> str:
...     return f"user-{n}"
>>> asyncio.run(map_async(maybe(7), fetch))
Some('user-7')
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, cast

from maybekit.core.errors import require
from maybekit.core.maybe import Maybe

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


async def map_async(subject: Maybe[T], selector: Callable[[T], Awaitable[U | None]]) -> Maybe[U]:
    """Await ``selector(value)`` when present and re-wrap the result."""
    require(selector, "selector")
    if subject.is_nothing():
        return Maybe.nothing()
    return Maybe.of(await selector(subject.value))


async def bind_async(
    subject: Maybe[T], selector: Callable[[T], Awaitable[Maybe[U]]]
) -> Maybe[U]:
    """Await ``selector(value)`` (which yields a ``Maybe``) when present."""
    require(selector, "selector")
    if subject.is_nothing():
        return Maybe.nothing()
    return Maybe.of(await selector(subject.value))


async def filter_async(subject: Maybe[T], predicate: Callable[[T], Awaitable[bool]]) -> Maybe[T]:
    """Keep the payload only if the awaited ``predicate`` holds."""
    require(predicate, "predicate")
    if subject.is_nothing():
        return subject
    if await predicate(subject.value):
        return subject
    return Maybe.nothing()


async def for_each_async(subject: Maybe[T], consumer: Callable[[T], Awaitable[Any]]) -> None:
    """Await ``consumer(value)`` if present."""
    require(consumer, "consumer")
    if subject.has_value():
        await consumer(subject.value)


async def zip_async(
    subject: Maybe[T],
    other: Maybe[U],
    combiner: Callable[[T, U], Awaitable[R | Maybe[R] | None]],
) -> Maybe[R]:
    """Await ``combiner(a, b)`` when both are present and re-wrap the result."""
    require(combiner, "combiner")
    if subject.is_nothing() or other.is_nothing():
        return Maybe.nothing()
    return Maybe.of(cast("R | Maybe[R] | None", await combiner(subject.value, other.value)))


async def or_else_async(subject: Maybe[T], supplier: Callable[[], Awaitable[T]]) -> T:
    """Return the payload, or await ``supplier()`` for a default."""
    require(supplier, "supplier")
    if subject.has_value():
        return subject.value
    return await supplier()


__all__ = [
    "bind_async",
    "filter_async",
    "for_each_async",
    "map_async",
    "or_else_async",
    "zip_async",
]
