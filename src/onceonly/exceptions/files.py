"""File availability exceptions."""

from __future__ import annotations

from onceonly.exceptions.base import OnceOnlyError


class FileUnavailableError(OnceOnlyError, FileNotFoundError):
    """Raised when a declared file is missing or cannot be opened."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f"File {path} does not exist!" if reason is None else f"File {path} is unavailable ({reason})"
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])
