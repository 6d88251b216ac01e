"""Tests for `first`: results, short-circuiting and traversal counts."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from maybekit.core.errors import InvalidArgument
from maybekit.core.maybe import NOTHING, maybe
from maybekit.sequences import first


def test_first_with_none_source_returns_nothing() -> None:
    """A `None` source behaves like an empty one."""
    assert first(None) is NOTHING
    assert first(None, lambda _: True) is NOTHING


@pytest.mark.parametrize("items", [[], [1], [1, 2], ["1"], ["1", "2"]])  # type: ignore[misc]
def test_first_with_none_predicate_raises_before_iterating(counting: Any, items: list[Any]) -> None:
    """An explicit `None` predicate fails without touching the sequence."""
    source = counting(items)
    with pytest.raises(InvalidArgument):
        first(source, None)  # type: ignore[arg-type]
    assert (source.iter_calls, source.advances, source.reads) == (0, 0, 0)


def test_first_with_none_predicate_and_none_source_raises() -> None:
    """The predicate check wins even when there is nothing to scan."""
    with pytest.raises(InvalidArgument):
        first(None, None)  # type: ignore[arg-type]


@pytest.mark.parametrize(  # type: ignore[misc]
    ("items", "expected", "advances", "reads"),
    [
        ([], NOTHING, 1, 0),
        ([1], maybe(1), 1, 1),
        ([1, 2], maybe(1), 1, 1),
        (["1"], maybe("1"), 1, 1),
        (["1", "2"], maybe("1"), 1, 1),
        ([None, 2], NOTHING, 1, 1),
    ],
)
def test_first_reads_at_most_one_element(
    counting: Any, items: list[Any], expected: Any, advances: int, reads: int
) -> None:
    """Without a predicate only one advance is ever made."""
    source = counting(items)
    assert first(source) == expected
    assert source.iter_calls == 1
    assert source.advances == advances
    assert source.reads == reads
    assert source.closed == 1


@pytest.mark.parametrize(  # type: ignore[misc]
    ("items", "predicate", "expected", "advances", "reads"),
    [
        ([], lambda i: i > 1, NOTHING, 1, 0),
        ([1], lambda i: i > 1, NOTHING, 2, 1),
        ([1, 2, 3, 4, 5, 6, 7], lambda i: i > 2, maybe(3), 3, 3),
        ([], lambda s: len(s) > 1, NOTHING, 1, 0),
        (["1"], lambda s: int(s) > 1, NOTHING, 2, 1),
        (["1", "2", "3", "4", "5", "6", "7"], lambda s: int(s) > 2, maybe("3"), 3, 3),
    ],
)
def test_first_with_predicate_stops_at_first_match(
    counting: Any,
    items: list[Any],
    predicate: Callable[[Any], bool],
    expected: Any,
    advances: int,
    reads: int,
) -> None:
    """With a predicate the scan stops at the first match or at exhaustion."""
    source = counting(items)
    assert first(source, predicate) == expected
    assert source.iter_calls == 1
    assert source.advances == advances
    assert source.reads == reads
    assert source.closed == 1


def test_first_handles_maybe_elements_without_nesting() -> None:
    """Elements that already are Maybe values are returned as-is."""
    assert first([maybe(1), maybe(2)]) == maybe(1)
    assert first([NOTHING, maybe(2)]) is NOTHING
    assert first([NOTHING, maybe(2)], lambda m: m.has_value()) == maybe(2)


def test_first_works_on_infinite_generators() -> None:
    """Short-circuiting makes infinite sources safe."""

    def naturals() -> Iterator[int]:
        n = 0
        while True:
            yield n
            n += 1

    assert first(naturals(), lambda n: n * n > 50) == maybe(8)


def test_first_closes_iterator_when_predicate_raises(counting: Any) -> None:
    """The iterator is released even when the predicate fails."""
    source = counting([1, 2, 3])

    def boom(_: int) -> bool:
        raise RuntimeError("predicate failed")

    with pytest.raises(RuntimeError, match="predicate failed"):
        first(source, boom)
    assert source.closed == 1


def test_first_leaves_caller_iterators_open() -> None:
    """An iterator passed in directly is not closed, so the caller may resume it."""
    it = iter([1, 2, 3])
    assert first(it) == maybe(1)
    assert list(it) == [2, 3]
