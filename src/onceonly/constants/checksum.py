"""Constants used by checksum backends and the cache key."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 65536
DEFAULT_DIGEST_ALGORITHM: str = "md5"
CACHE_KEY_ALGORITHM: str = "sha1"

DEFAULT_LARGE_FILE_THRESHOLD_BYTES: int = 20_000_000
EXTERNAL_MD5_TOOL: str = "md5sum"

PRECALCULATED_EXTENSION: str = ".md5"
