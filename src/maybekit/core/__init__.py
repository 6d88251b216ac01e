"""Core package initializer for maybekit.

Downstream code imports from the concrete modules, e.g.:
    from maybekit.core.maybe import Maybe, maybe, NOTHING
    from maybekit.core.settings import settings, load_settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
