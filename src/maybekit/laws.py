"""Executable monad and ordering laws for ``Maybe``.

The checks are plain predicates so they can be reused from tests, from the
``maybekit laws`` command, or from a caller validating their own selector
functions.

Laws
----
- Left identity:  ``maybe(v).bind(f) == f(v)``
- Right identity: ``m.bind(maybe) == m``
- Associativity:  ``m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))``
- Ordering:       sorting places every absent value first and present values
  in ascending order; reversing gives descending order with absent values last.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from maybekit.core.maybe import NOTHING, Maybe, maybe, maybe_non_empty

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class LawResult(BaseModel):
    """Outcome of one law check on one sample."""

    model_config = ConfigDict(frozen=True)

    name: str
    sample: str
    passed: bool


def check_left_identity(value: T, f: Callable[[T], Maybe[U]]) -> bool:
    """``maybe(value).bind(f) == f(value)`` for a non-``None`` value."""
    return maybe(value).bind(f) == Maybe.of(f(value))


def check_right_identity(m: Maybe[T]) -> bool:
    """``m.bind(maybe) == m``."""
    return m.bind(maybe) == m


def check_associativity(
    m: Maybe[T], f: Callable[[T], Maybe[U]], g: Callable[[U], Maybe[V]]
) -> bool:
    """``m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))``."""
    return m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


def check_ordering(values: Iterable[Maybe[Any]]) -> bool:
    """Sorted ``values`` are absent-first and ascending; reversed, descending."""
    ascending = sorted(values)
    if any(a.compare_to(b) > 0 for a, b in pairwise(ascending)):
        return False
    seen_present = False
    for item in ascending:
        if item.has_value():
            seen_present = True
        elif seen_present:
            return False
    descending = sorted(ascending, reverse=True)
    return all(a.compare_to(b) >= 0 for a, b in pairwise(descending))


def _to_text(value: Any) -> Maybe[str]:
    return maybe_non_empty(str(value))


def _long_enough(text: str) -> Maybe[int]:
    return maybe(len(text)).filter(lambda n: n > 1)


DEFAULT_SAMPLES: tuple[Any, ...] = (0, 1, -42, 2.5, "", "text", (1, 2))
DEFAULT_ORDERINGS: tuple[Sequence[Maybe[Any]], ...] = (
    (maybe(2), maybe(1), NOTHING, NOTHING, maybe(3)),
    (maybe("b"), NOTHING, maybe("a"), maybe("c")),
    (maybe(float("nan")), maybe(1.5), NOTHING, maybe(-0.5)),
)


def run_law_suite(
    samples: Iterable[Any] = DEFAULT_SAMPLES,
    orderings: Iterable[Sequence[Maybe[Any]]] = DEFAULT_ORDERINGS,
) -> list[LawResult]:
    """Run every law over the given samples and return one result per check."""
    results: list[LawResult] = []
    for value in samples:
        m = maybe(value)
        results.append(
            LawResult(
                name="left identity",
                sample=repr(value),
                passed=check_left_identity(value, _to_text),
            )
        )
        results.append(
            LawResult(name="right identity", sample=repr(m), passed=check_right_identity(m))
        )
        results.append(
            LawResult(
                name="associativity",
                sample=repr(m),
                passed=check_associativity(m, _to_text, _long_enough),
            )
        )
    results.append(
        LawResult(name="right identity", sample=repr(NOTHING), passed=check_right_identity(NOTHING))
    )
    for ordering in orderings:
        results.append(
            LawResult(name="ordering", sample=repr(list(ordering)), passed=check_ordering(ordering))
        )
    return results


__all__ = [
    "DEFAULT_ORDERINGS",
    "DEFAULT_SAMPLES",
    "LawResult",
    "check_associativity",
    "check_left_identity",
    "check_ordering",
    "check_right_identity",
    "run_law_suite",
]
