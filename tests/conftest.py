"""Shared fixtures: an iterable that counts how it is traversed.

`CountingIterable` plays the role of a mocked sequence. Every call to
`iter()` hands out a fresh iterator whose `__next__` bumps:

- ``advances``: every `next()` call, including the one raising StopIteration,
- ``reads``: every element actually delivered,

and whose `close()` bumps ``closed``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

import pytest

T = TypeVar("T")


class CountingIterable(Generic[T]):
    """Re-iterable sequence that records traversal statistics."""

    def __init__(self, items: Iterable[T]) -> None:
        self._items = list(items)
        self.iter_calls = 0
        self.advances = 0
        self.reads = 0
        self.closed = 0

    def __iter__(self) -> Iterator[T]:
        self.iter_calls += 1
        return _CountingIterator(self)


class _CountingIterator(Generic[T]):
    def __init__(self, owner: CountingIterable[T]) -> None:
        self._owner = owner
        self._inner = iter(owner._items)

    def __iter__(self) -> _CountingIterator[T]:
        return self

    def __next__(self) -> T:
        self._owner.advances += 1
        value = next(self._inner)
        self._owner.reads += 1
        return value

    def close(self) -> None:
        self._owner.closed += 1


@pytest.fixture  # type: ignore[misc]
def counting() -> Any:
    """Return the `CountingIterable` class for building traced sources."""
    return CountingIterable
