"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "once-only.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "prefix",
        "cache_dir",
        "large_file_hasher",
        "large_file_threshold_bytes",
        "hasher_timeout_seconds",
        "precalculated",
        "skip_regex",
        "skip_glob",
    }
)
