"""Sequence scanners that summarize an iterable as a ``Maybe``.

Every scanner here honors the same traversal contract:

- callable arguments are validated *before* ``iter()`` is called on the
  source, so an invalid call never touches the sequence;
- a ``None`` source is treated as empty (never an error);
- the source is iterated at most once, and only as far as the answer needs;
- an iterator obtained from a re-iterable source is closed on every exit path
  (normal return, early return, raised error). Iterators passed in directly
  belong to the caller and are left open.

Elements are wrapped with :meth:`Maybe.of`, so ``None`` elements yield
``NOTHING`` and elements that already are ``Maybe`` values are not nested.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from enum import Enum
from typing import Any, Final, Generic, Literal, TypeVar, cast

from maybekit.core.errors import TooManyElements, require
from maybekit.core.maybe import NOTHING, Maybe
from maybekit.core.settings import get_logger

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

log = get_logger("maybekit.sequences")


class _Unset(Enum):
    """Marker for "argument not given", distinct from an explicit ``None``."""

    UNSET = "UNSET"


UNSET: Final = _Unset.UNSET
_END: Final = object()

Predicate = Callable[[T], bool]


@contextmanager
def _cursor(source: Iterable[T]) -> Iterator[Iterator[T]]:
    """Yield a single iterator over ``source`` and release it afterwards."""
    iterator = iter(source)
    try:
        yield iterator
    finally:
        if iterator is not source:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()


def first(
    source: Iterable[T | None] | None,
    predicate: Predicate[T] | Literal[_Unset.UNSET] = UNSET,
) -> Maybe[T]:
    """Return the first (matching) element of ``source`` as a ``Maybe``.

    Without a predicate the source is advanced exactly once. With a predicate
    it is advanced until the first match or exhaustion; e.g. ``[1..7]`` with
    ``x > 2`` is advanced three times and yields ``Some(3)``.

    Raises
    ------
    InvalidArgument
        If ``predicate`` is explicitly ``None``.
    """
    if predicate is not UNSET:
        require(predicate, "predicate")
    if source is None:
        return Maybe.nothing()

    with _cursor(source) as cursor:
        if predicate is UNSET:
            for element in cursor:
                return Maybe.of(element)
        else:
            for element in cursor:
                if predicate(cast(T, element)):
                    return Maybe.of(element)
    return Maybe.nothing()


def single(
    source: Iterable[T | None] | None,
    predicate: Predicate[T] | Literal[_Unset.UNSET] = UNSET,
) -> Maybe[T]:
    """Return the only (matching) element of ``source`` as a ``Maybe``.

    Without a predicate, uniqueness is checked with exactly one extra advance
    after the first element; the sequence is never counted. With a predicate
    the remainder after the first match is scanned and the second match fails
    immediately.

    Raises
    ------
    InvalidArgument
        If ``predicate`` is explicitly ``None``.
    TooManyElements
        If more than one (matching) element exists.
    """
    if predicate is not UNSET:
        require(predicate, "predicate")
    if source is None:
        return Maybe.nothing()

    with _cursor(source) as cursor:
        if predicate is UNSET:
            found: Any = next(cursor, _END)
            if found is _END:
                return Maybe.nothing()
            if next(cursor, _END) is not _END:
                log.debug("single(): second element found, rejecting")
                raise TooManyElements()
            return Maybe.of(found)

        matched: Any = _END
        for element in cursor:
            if not predicate(cast(T, element)):
                continue
            if matched is not _END:
                log.debug("single(): second matching element found, rejecting")
                raise TooManyElements(filtered=True)
            matched = element
    if matched is _END:
        return Maybe.nothing()
    return Maybe.of(matched)


def get_at(source: Sequence[T | None] | None, position: int) -> Maybe[T]:
    """Return the element at a 0-based ``position``.

    Negative positions never wrap around; they, out-of-range positions and a
    ``None`` source all yield ``NOTHING``.
    """
    if source is None or position < 0 or position >= len(source):
        return Maybe.nothing()
    return Maybe.of(source[position])


def lookup(source: Mapping[K, V | Maybe[V] | None] | None, key: K | Maybe[K]) -> Maybe[V]:
    """Return the value stored under ``key`` as a ``Maybe``.

    ``key`` may itself be a ``Maybe``; an absent key yields ``NOTHING``.
    Values that already are ``Maybe`` are returned as-is, not double-wrapped.
    """
    if source is None:
        return Maybe.nothing()
    if isinstance(key, Maybe):
        if key.is_nothing():
            return Maybe.nothing()
        key = cast(K, key.value)
    found = source.get(cast(K, key), cast(Any, _END))
    if found is _END:
        return Maybe.nothing()
    return Maybe.of(cast("V | Maybe[V] | None", found))


class CompactView(Generic[T]):
    """Lazy view over the present values of an iterable of ``Maybe``/nullable items.

    Iterating the view iterates the source again, so the view is restartable
    exactly when the source is. Nothing is materialized, which keeps it safe
    on infinite sources.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[Maybe[T] | T | None] | None) -> None:
        self._source = source

    def __iter__(self) -> Iterator[T]:
        if self._source is None:
            return
        for item in self._source:
            if item is None or item is NOTHING:
                continue
            if isinstance(item, Maybe):
                yield cast(T, item.value)
            else:
                yield cast(T, item)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return f"CompactView({self._source!r})"


def compact(source: Iterable[Maybe[T] | T | None] | None) -> CompactView[T]:
    """Drop absent entries (``NOTHING`` / ``None``) and unwrap the rest, in order."""
    return CompactView(source)


__all__ = [
    "UNSET",
    "CompactView",
    "compact",
    "first",
    "get_at",
    "lookup",
    "single",
]
