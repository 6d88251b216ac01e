"""Sequence scanners producing ``Maybe`` results.

Currently exposed:

- :func:`first` / :func:`single`: short-circuiting single-pass scans,
- :func:`get_at` / :func:`lookup`: bounds- and key-safe indexing,
- :func:`compact`: lazy view over the present values of a sequence.
"""

from __future__ import annotations

from .scan import UNSET, CompactView, compact, first, get_at, lookup, single

__all__ = ["UNSET", "CompactView", "compact", "first", "get_at", "lookup", "single"]
