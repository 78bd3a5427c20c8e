"""Configuration-related exceptions."""

from __future__ import annotations

from onceonly.exceptions.base import OnceOnlyError


class ConfigError(OnceOnlyError, ValueError):
    """Raised when once-only configuration is invalid."""
