"""maybekit: a typed optional value (``Maybe``) plus single-pass sequence scanners.

Most callers only need the names re-exported here:

    from maybekit import maybe, NOTHING, first, single, compact
"""

from __future__ import annotations

from maybekit.core.defaults import (
    or_empty,
    or_empty_collection,
    or_false,
    or_none,
    or_true,
)
from maybekit.core.errors import (
    EmptyValueAccess,
    InvalidArgument,
    MaybeError,
    NotComparable,
    TooManyElements,
)
from maybekit.core.maybe import NOTHING, Maybe, Nothing, Some, maybe, maybe_non_empty, nothing, some
from maybekit.sequences import compact, first, get_at, lookup, single

__all__ = [
    "NOTHING",
    "EmptyValueAccess",
    "InvalidArgument",
    "Maybe",
    "MaybeError",
    "NotComparable",
    "Nothing",
    "Some",
    "TooManyElements",
    "__version__",
    "compact",
    "first",
    "get_at",
    "lookup",
    "maybe",
    "maybe_non_empty",
    "nothing",
    "or_empty",
    "or_empty_collection",
    "or_false",
    "or_none",
    "or_true",
    "single",
    "some",
]
__version__ = "0.1.0"
