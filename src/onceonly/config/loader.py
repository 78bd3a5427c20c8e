"""Config loading and normalization for once-only."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from onceonly.config.model import OnceOnlySettings
from onceonly.constants.checksum import DEFAULT_LARGE_FILE_THRESHOLD_BYTES
from onceonly.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from onceonly.constants.manifest import DEFAULT_MANIFEST_PREFIX
from onceonly.exceptions import ConfigError
from onceonly.hashing.backend import BackendConfig
from onceonly.hashing.cache_key import probe_cache_key_hash
from onceonly.hashing.hashers import ExternalHasher, probe_default_hasher


def load_config(root: Path, config_path: Path | None = None) -> OnceOnlySettings:
    """Load and validate settings from ``once-only.yaml`` or an explicit path.

    Relative paths in the file are resolved against the directory holding it.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return OnceOnlySettings(cache_dir=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key `{key}`{_suggest_key(str(key))}")

    base = path.parent

    prefix = raw.get("prefix", DEFAULT_MANIFEST_PREFIX)
    if not isinstance(prefix, str) or not prefix.strip() or "/" in prefix:
        raise ConfigError("prefix must be a non-empty string without path separators")

    cache_dir_raw = raw.get("cache_dir", ".")
    if not isinstance(cache_dir_raw, str):
        raise ConfigError("cache_dir must be a string")

    large_file_hasher = raw.get("large_file_hasher")
    if large_file_hasher is not None and (not isinstance(large_file_hasher, str) or not large_file_hasher.strip()):
        raise ConfigError("large_file_hasher must be a non-empty string or null")

    threshold = raw.get("large_file_threshold_bytes", DEFAULT_LARGE_FILE_THRESHOLD_BYTES)
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
        raise ConfigError("large_file_threshold_bytes must be a positive integer")

    timeout = raw.get("hasher_timeout_seconds")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0):
        raise ConfigError("hasher_timeout_seconds must be a positive number or null")

    return OnceOnlySettings(
        prefix=prefix.strip(),
        cache_dir=(base / cache_dir_raw).resolve(),
        large_file_hasher=large_file_hasher.strip() if large_file_hasher else None,
        large_file_threshold_bytes=threshold,
        hasher_timeout_seconds=float(timeout) if timeout is not None else None,
        precalculated=tuple(
            (base / item).resolve() for item in _ensure_string_list(raw.get("precalculated", []), "precalculated")
        ),
        skip_regex=tuple(_ensure_string_list(raw.get("skip_regex", []), "skip_regex")),
        skip_glob=tuple(_ensure_string_list(raw.get("skip_glob", []), "skip_glob")),
    )


def build_backend_config(settings: OnceOnlySettings) -> BackendConfig:
    """Select hashers for *settings*; capability probes run once here."""
    large_file_hasher = (
        ExternalHasher(settings.large_file_hasher, timeout_seconds=settings.hasher_timeout_seconds)
        if settings.large_file_hasher
        else None
    )
    return BackendConfig(
        default_hasher=probe_default_hasher(settings.hasher_timeout_seconds),
        large_file_hasher=large_file_hasher,
        large_file_threshold_bytes=settings.large_file_threshold_bytes,
        cache_key_factory=probe_cache_key_hash(),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _suggest_key(key: str) -> str:
    """Return a 'did you mean' hint for a mistyped config key."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1)
    return f" (did you mean `{matches[0]}`?)" if matches else ""
