"""Per-file fingerprinting with precalculated, large-file and default backends."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from onceonly.constants.checksum import DEFAULT_LARGE_FILE_THRESHOLD_BYTES
from onceonly.exceptions import ConfigError, FileUnavailableError
from onceonly.hashing.cache_key import HashFactory, probe_cache_key_hash
from onceonly.hashing.hashers import Hasher, InProcessHasher
from onceonly.types import FingerprintRecord, HashKind, PrecalculatedEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendConfig:
    """Hashers, thresholds and the cache-key constructor selected for one run."""

    default_hasher: Hasher = field(default_factory=InProcessHasher)
    large_file_hasher: Hasher | None = None
    large_file_threshold_bytes: int = DEFAULT_LARGE_FILE_THRESHOLD_BYTES
    cache_key_factory: HashFactory = field(default_factory=probe_cache_key_hash)

    def hasher_for(self, kind: HashKind) -> Hasher:
        """Return the hasher that re-creates a recorded fingerprint of *kind*."""
        if kind == "large":
            if self.large_file_hasher is None:
                raise ConfigError("Manifest records a large-file digest but no large_file_hasher is configured")
            return self.large_file_hasher
        return self.default_hasher


def compute_fingerprint(
    path: str,
    *,
    index: Mapping[str, PrecalculatedEntry] | None = None,
    config: BackendConfig,
) -> FingerprintRecord:
    """Fingerprint one file.

    A fresh precalculated entry is used without reading the file. Otherwise
    files above the threshold go to the large-file hasher when one is
    configured, and everything else to the default hasher.
    """
    absolute = os.path.abspath(path)
    try:
        stat = os.stat(absolute)
    except OSError as exc:
        raise FileUnavailableError(path, exc.strerror or str(exc)) from exc

    entry = index.get(absolute) if index else None
    if entry is not None and entry.is_fresh_for(stat.st_mtime_ns):
        logger.info("Precalculated %s", path)
        return FingerprintRecord(kind="precalculated", value=entry.hash_value, path=absolute)

    if config.large_file_hasher is not None and stat.st_size > config.large_file_threshold_bytes:
        value = config.large_file_hasher.digest(Path(absolute))
        return FingerprintRecord(kind="large", value=value, path=absolute)

    value = config.default_hasher.digest(Path(absolute))
    return FingerprintRecord(kind="default", value=value, path=absolute)


def fingerprint_files(
    files: Iterable[str],
    *,
    index: Mapping[str, PrecalculatedEntry] | None = None,
    config: BackendConfig,
) -> list[FingerprintRecord]:
    """Fingerprint files in order, aborting on the first unavailable one."""
    return [compute_fingerprint(path, index=index, config=config) for path in files]
