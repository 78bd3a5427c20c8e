"""Typed fingerprint, precalculated index and manifest records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

HashKind: TypeAlias = Literal["default", "large", "precalculated"]


@dataclass(frozen=True)
class FingerprintRecord:
    """Content fingerprint of one file at the time it was computed."""

    kind: HashKind
    value: str
    path: str


@dataclass(frozen=True)
class PrecalculatedEntry:
    """Externally supplied digest for one absolute path.

    ``source_mtime_ns`` is the modification time of the listing file that
    carried the digest, not of the target file.
    """

    path: str
    hash_value: str
    source_mtime_ns: int

    def is_fresh_for(self, target_mtime_ns: int) -> bool:
        """Return True when the target has not been touched since the listing was written."""
        return target_mtime_ns < self.source_mtime_ns


@dataclass(frozen=True)
class Manifest:
    """Recorded input fingerprints and, once the command ran, output fingerprints."""

    inputs: tuple[FingerprintRecord, ...]
    outputs: tuple[FingerprintRecord, ...] | None = None

    @property
    def has_output_section(self) -> bool:
        return self.outputs is not None
