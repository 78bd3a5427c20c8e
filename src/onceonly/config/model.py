"""Config data model for once-only."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from onceonly.constants.checksum import DEFAULT_LARGE_FILE_THRESHOLD_BYTES
from onceonly.constants.manifest import DEFAULT_MANIFEST_PREFIX


@dataclass(frozen=True)
class OnceOnlySettings:
    """Resolved once-only settings."""

    prefix: str = DEFAULT_MANIFEST_PREFIX
    cache_dir: Path = Path(".")
    large_file_hasher: str | None = None
    large_file_threshold_bytes: int = DEFAULT_LARGE_FILE_THRESHOLD_BYTES
    hasher_timeout_seconds: float | None = None
    precalculated: tuple[Path, ...] = ()
    skip_regex: tuple[str, ...] = ()
    skip_glob: tuple[str, ...] = ()

    def manifest_path(self, manifest_name: str) -> Path:
        """Return where a manifest with *manifest_name* lives."""
        return self.cache_dir / manifest_name
