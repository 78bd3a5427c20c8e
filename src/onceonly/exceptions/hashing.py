"""External hash tool exceptions."""

from __future__ import annotations

from onceonly.exceptions.base import OnceOnlyError


class ExternalHasherFailureError(OnceOnlyError, RuntimeError):
    """Raised when an external hash tool fails or produces no digest."""

    def __init__(self, tool: str, path: str, detail: str) -> None:
        super().__init__(f"{tool} failed on {path}: {detail}")
        self.tool = tool
        self.path = path
