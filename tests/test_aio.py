"""Tests for the async combinators; each mirrors its synchronous counterpart."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from maybekit.aio import (
    bind_async,
    filter_async,
    for_each_async,
    map_async,
    or_else_async,
    zip_async,
)
from maybekit.core.errors import InvalidArgument
from maybekit.core.maybe import NOTHING, Maybe, maybe, nothing


async def _double(x: int) -> int:
    await asyncio.sleep(0)
    return x * 2


async def _half(x: int) -> Maybe[int]:
    return maybe(x // 2) if x % 2 == 0 else nothing()


async def _is_even(x: int) -> bool:
    return x % 2 == 0


def test_map_and_bind_async_match_sync() -> None:
    """Presence semantics equal the synchronous versions."""
    assert asyncio.run(map_async(maybe(4), _double)) == maybe(4).map(lambda x: x * 2)
    assert asyncio.run(map_async(nothing(), _double)) is NOTHING
    assert asyncio.run(bind_async(maybe(4), _half)) == maybe(2)
    assert asyncio.run(bind_async(maybe(3), _half)) is NOTHING
    assert asyncio.run(bind_async(nothing(), _half)) is NOTHING


def test_filter_and_zip_async() -> None:
    """Filtering and zipping await their callables only when needed."""
    assert asyncio.run(filter_async(maybe(4), _is_even)) == maybe(4)
    assert asyncio.run(filter_async(maybe(3), _is_even)) is NOTHING
    assert asyncio.run(filter_async(nothing(), _is_even)) is NOTHING

    async def add(a: int, b: int) -> int:
        return a + b

    assert asyncio.run(zip_async(maybe(1), maybe(2), add)) == maybe(3)
    assert asyncio.run(zip_async(maybe(1), nothing(), add)) is NOTHING
    assert asyncio.run(zip_async(nothing(), maybe(2), add)) is NOTHING


def test_for_each_and_or_else_async() -> None:
    """Consumers run only when present; suppliers only when absent."""
    seen: list[Any] = []

    async def record(x: Any) -> None:
        seen.append(x)

    async def fallback() -> int:
        return 42

    asyncio.run(for_each_async(maybe("a"), record))
    asyncio.run(for_each_async(nothing(), record))
    assert seen == ["a"]
    assert asyncio.run(or_else_async(maybe(1), fallback)) == 1
    assert asyncio.run(or_else_async(nothing(), fallback)) == 42


def test_async_errors_propagate_and_arguments_are_checked() -> None:
    """Errors from awaited callables surface unchanged; None callables are rejected."""

    async def boom(_: int) -> int:
        raise LookupError("remote failed")

    with pytest.raises(LookupError, match="remote failed"):
        asyncio.run(map_async(maybe(1), boom))
    with pytest.raises(InvalidArgument):
        asyncio.run(map_async(nothing(), None))  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        asyncio.run(for_each_async(maybe(1), None))  # type: ignore[arg-type]


@pytest.mark.parametrize(  # type: ignore[misc]
    "call",
    [
        lambda: bind_async(maybe(1), None),
        lambda: bind_async(nothing(), None),
        lambda: filter_async(maybe(1), None),
        lambda: filter_async(nothing(), None),
        lambda: zip_async(maybe(1), maybe(2), None),
        lambda: zip_async(nothing(), nothing(), None),
        lambda: or_else_async(maybe(1), None),
        lambda: or_else_async(nothing(), None),
    ],
)
def test_none_callables_are_rejected_regardless_of_presence(call: Callable[[], Any]) -> None:
    """Every async combinator validates its callable before looking at the value."""
    with pytest.raises(InvalidArgument):
        asyncio.run(call())
