"""Shared exception hierarchy for once-only."""

from __future__ import annotations

from .base import OnceOnlyError
from .config import ConfigError
from .files import FileUnavailableError
from .hashing import ExternalHasherFailureError
from .manifest import InvalidInputError, InvalidManifestFormatError, ManifestWriteError

__all__ = [
    "ConfigError",
    "ExternalHasherFailureError",
    "FileUnavailableError",
    "InvalidInputError",
    "InvalidManifestFormatError",
    "ManifestWriteError",
    "OnceOnlyError",
]
