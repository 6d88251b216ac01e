"""Typed optional-value container: ``Maybe[T]`` = ``Some[T]`` | ``Nothing``.

Motivation
----------
Lookups, scans and parsers often have "no answer" as a perfectly normal
outcome. Returning ``None`` loses the distinction between "absent" and "present
but None-ish", and raising exceptions turns an expected case into control
flow. This module provides a small ``Maybe[T]`` with:

- ``Some(value)`` / ``NOTHING`` variants,
- combinators: ``map``, ``bind``, ``filter``, ``zip``,
- defaults: ``or_``, ``or_else``, ``or_throw``, ``or_alternative``,
- a total ordering in which absence sorts before every present value.

Construction rules
------------------
``maybe(x)`` (a.k.a. ``Maybe.of``) is the canonical constructor:

- ``None`` becomes ``NOTHING``;
- a value that already is a ``Maybe`` is returned unchanged (wrapping is
  idempotent, so ``Maybe[Maybe[T]]`` is never produced);
- anything else, including the empty string, becomes ``Some(x)``.

``maybe_non_empty(x)`` additionally treats ``""`` as absent.

Example
-------
>>> from maybekit.core.maybe import maybe, NOTHING
>>> maybe("42").map(int).filter(lambda n: n > 40).or_(0)
42
>>> sorted([maybe(2), NOTHING, maybe(1)])
[Nothing, Some(1), Some(2)]
"""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Generic, NoReturn, TypeVar, cast

from .errors import EmptyValueAccess, InvalidArgument, NotComparable, require

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    return isinstance(value, Decimal) and value.is_nan()


def _same(left: Any, right: Any) -> bool:
    """Payload equality: identity first, then NaN-equals-NaN, then ``==``."""
    if left is right:
        return True
    left_nan, right_nan = _is_nan(left), _is_nan(right)
    if left_nan or right_nan:
        return left_nan and right_nan
    return bool(left == right)


def _natural_compare(left: Any, right: Any) -> int:
    """Three-way compare two payloads using their natural ordering.

    NaN (float or ``Decimal``) sorts before every other number and equals any
    other NaN, matching ``_same``, so sorting a list containing NaN stays
    deterministic.
    """
    left_nan, right_nan = _is_nan(left), _is_nan(right)
    if left_nan or right_nan:
        return int(not left_nan) - int(not right_nan)
    try:
        if left < right:
            return -1
        if right < left:
            return 1
    except TypeError as exc:
        raise NotComparable(left, right) from exc
    return 0


class Maybe(Generic[T]):
    """Sum type representing either a present value (`Some[T]`) or `Nothing`."""

    __slots__ = ()

    # Declared for type checkers; `Some` stores it, `Nothing` raises on access.
    value: T

    # ----- Construction ------------------------------------------------------
    @staticmethod
    def of(value: T | Maybe[T] | None) -> Maybe[T]:
        """Wrap ``value``; ``None`` gives ``NOTHING`` and a ``Maybe`` is kept as-is."""
        if value is None:
            return cast(Maybe[T], NOTHING)
        if isinstance(value, Maybe):
            return cast(Maybe[T], value)
        return Some(value)

    from_optional = of

    @staticmethod
    def of_non_empty(value: T | Maybe[T] | None) -> Maybe[T]:
        """Like :meth:`of`, but the empty string is treated as absent too."""
        return Maybe.of(value).filter(lambda v: not (isinstance(v, str) and v == ""))

    @staticmethod
    def nothing() -> Maybe[T]:
        """Return the shared absent instance, typed as ``Maybe[T]``."""
        return cast(Maybe[T], NOTHING)

    # ----- Introspection -----------------------------------------------------
    def has_value(self) -> bool:
        """Return ``True`` if this is a :class:`Some` value."""
        return isinstance(self, Some)

    def is_nothing(self) -> bool:
        """Return ``True`` if this is :data:`NOTHING`."""
        return not isinstance(self, Some)

    # ----- Defaults ----------------------------------------------------------
    def or_(self, default: T) -> T:
        """Return the payload, or ``default`` when absent."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        return default

    def or_else(self, supplier: Callable[[], T]) -> T:
        """Return the payload, or compute a default lazily with ``supplier()``."""
        require(supplier, "supplier")
        if isinstance(self, Some):
            return cast(Some[T], self).value
        return supplier()

    def or_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Return the payload, or raise the error produced by ``error_supplier()``."""
        require(error_supplier, "error_supplier")
        if isinstance(self, Some):
            return cast(Some[T], self).value
        raise error_supplier()

    def or_alternative(
        self, alternative: T | Maybe[T] | Callable[[], T | Maybe[T] | None]
    ) -> Maybe[T]:
        """Return ``self`` if present, else ``alternative`` as a ``Maybe``.

        ``alternative`` may be a raw value, a ``Maybe``, or a zero-argument
        callable returning either; a callable is only invoked when ``self`` is
        absent. Because of that, a callable payload cannot be passed as a raw
        alternative: wrap it with :func:`some` first.
        """
        require(alternative, "alternative")
        if isinstance(self, Some):
            return self
        if callable(alternative) and not isinstance(alternative, Maybe):
            return Maybe.of(alternative())
        return Maybe.of(cast("T | Maybe[T]", alternative))

    def to_optional(self) -> T | None:
        """Return the payload, or ``None`` when absent."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        return None

    # ----- Combinators -------------------------------------------------------
    def map(self, selector: Callable[[T], U | None]) -> Maybe[U]:
        """Apply ``selector`` to the payload and re-wrap the result."""
        require(selector, "selector")
        if isinstance(self, Some):
            return Maybe.of(selector(cast(Some[T], self).value))
        return cast(Maybe[U], NOTHING)

    def bind(
        self,
        selector: Callable[[T], Maybe[U]],
        result_selector: Callable[[T, U], R] | None = None,
    ) -> Maybe[Any]:
        """Chain a computation that itself returns a ``Maybe`` (flat-map).

        With ``result_selector`` this is the two-step query form: bind to
        ``selector(x)`` and then project both payloads through
        ``result_selector(x, y)``.
        """
        require(selector, "selector")
        if not isinstance(self, Some):
            return NOTHING
        outer = cast(Some[T], self).value
        inner: Maybe[U] = Maybe.of(selector(outer))
        if result_selector is None:
            return inner
        return inner.map(lambda y: result_selector(outer, y))

    flat_map = bind

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the payload only if ``predicate`` holds."""
        require(predicate, "predicate")
        if isinstance(self, Some) and predicate(cast(Some[T], self).value):
            return self
        return cast(Maybe[T], NOTHING)

    def matches(self, predicate_or_value: Callable[[T], bool] | T) -> bool:
        """Return ``True`` if present and the payload satisfies the argument.

        A callable argument is used as a predicate; any other argument is
        compared to the payload by equality.
        """
        require(predicate_or_value, "predicate")
        if not isinstance(self, Some):
            return False
        current = cast(Some[T], self).value
        if callable(predicate_or_value):
            return bool(predicate_or_value(current))
        return _same(current, predicate_or_value)

    def for_each(self, consumer: Callable[[T], Any]) -> None:
        """Call ``consumer(value)`` if present; do nothing otherwise."""
        require(consumer, "consumer")
        if isinstance(self, Some):
            consumer(cast(Some[T], self).value)

    def zip(
        self, other: Maybe[U], combiner: Callable[[T, U], R | Maybe[R] | None]
    ) -> Maybe[R]:
        """Combine two payloads when both are present; the result is re-wrapped."""
        require(combiner, "combiner")
        if isinstance(self, Some) and isinstance(other, Some):
            return Maybe.of(combiner(cast(Some[T], self).value, cast(Some[U], other).value))
        return cast(Maybe[R], NOTHING)

    def zip_for_each(self, other: Maybe[U], consumer: Callable[[T, U], Any]) -> None:
        """Call ``consumer(a, b)`` only when both maybes are present."""
        require(consumer, "consumer")
        if isinstance(self, Some) and isinstance(other, Some):
            consumer(cast(Some[T], self).value, cast(Some[U], other).value)

    # ----- Ordering ----------------------------------------------------------
    def compare_to(self, other: Maybe[T]) -> int:
        """Three-way comparison: absent < present, then the payload ordering.

        Returns
        -------
        int
            ``-1``, ``0`` or ``1``.

        Raises
        ------
        NotComparable
            If both are present and the payloads cannot be ordered, or if
            ``other`` is not a ``Maybe``.
        """
        if not isinstance(other, Maybe):
            raise NotComparable(self, other)
        mine, theirs = isinstance(self, Some), isinstance(other, Some)
        if not mine or not theirs:
            return int(mine) - int(theirs)
        return _natural_compare(cast(Some[T], self).value, cast(Some[T], other).value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ----- Dunder helpers ----------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if isinstance(self, Some) and isinstance(other, Some):
            return _same(self.value, other.value)
        return self.is_nothing() and other.is_nothing()

    def __hash__(self) -> int:
        if isinstance(self, Some):
            current = cast(Some[T], self).value
            # NaN payloads are all equal, so they must share one hash.
            return sys.hash_info.nan if _is_nan(current) else hash(current)
        return 0

    def __iter__(self) -> Iterator[T]:
        if isinstance(self, Some):
            yield cast(Some[T], self).value

    def __str__(self) -> str:
        if isinstance(self, Some):
            return str(cast(Some[T], self).value)
        return ""

    def __repr__(self) -> str:
        if isinstance(self, Some):
            return f"Some({cast(Some[T], self).value!r})"
        return "Nothing"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Some(Maybe[T]):
    """Present value wrapping a payload of type ``T``.

    The payload can be neither ``None`` nor another ``Maybe``; use
    :func:`maybe` to build from a nullable or possibly wrapped value.
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None or isinstance(self.value, Maybe):
            raise InvalidArgument("value")


class Nothing(Maybe[Any]):
    """The absent value. ``Nothing()`` always returns the shared :data:`NOTHING`."""

    __slots__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        return (Nothing, ())

    @property  # type: ignore[override]
    def value(self) -> NoReturn:
        raise EmptyValueAccess()


NOTHING: Nothing = Nothing()


# ----- Convenience constructors ----------------------------------------------
def maybe(value: T | Maybe[T] | None) -> Maybe[T]:
    """Construct a ``Maybe`` from a nullable value (see :meth:`Maybe.of`)."""
    return Maybe.of(value)


def maybe_non_empty(value: T | Maybe[T] | None) -> Maybe[T]:
    """Construct a ``Maybe`` treating both ``None`` and ``""`` as absent."""
    return Maybe.of_non_empty(value)


def some(value: T | Maybe[T]) -> Maybe[T]:
    """Construct a present ``Maybe``; ``None`` is rejected, a ``Maybe`` is kept."""
    if value is None:
        raise InvalidArgument("value")
    if isinstance(value, Maybe):
        return cast(Maybe[T], value)
    return Some(value)


def nothing() -> Maybe[T]:
    """Return :data:`NOTHING` with better type inference at call sites."""
    return Maybe.nothing()


__all__ = [
    "NOTHING",
    "Maybe",
    "Nothing",
    "Some",
    "maybe",
    "maybe_non_empty",
    "nothing",
    "some",
]
