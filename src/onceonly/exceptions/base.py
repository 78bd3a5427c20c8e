"""Root exception type."""

from __future__ import annotations


class OnceOnlyError(Exception):
    """Base class for all once-only errors."""
