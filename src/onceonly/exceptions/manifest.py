"""Manifest and precalculated listing format exceptions."""

from __future__ import annotations

from onceonly.exceptions.base import OnceOnlyError


class InvalidManifestFormatError(OnceOnlyError, ValueError):
    """Raised when a manifest or listing file contains a malformed record."""


class InvalidInputError(InvalidManifestFormatError):
    """Raised when a precalculated listing does not carry the required extension."""


class ManifestWriteError(OnceOnlyError, OSError):
    """Raised when a manifest cannot be persisted to the cache directory."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write manifest {path} ({reason})")
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])
