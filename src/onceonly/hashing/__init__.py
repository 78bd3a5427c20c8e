"""Checksum backends, precalculated index and cache-key derivation."""

from .backend import BackendConfig, compute_fingerprint, fingerprint_files
from .cache_key import compute_cache_key_hash, derive_manifest_name, probe_cache_key_hash, record_fields
from .hashers import ExternalHasher, Hasher, InProcessHasher, probe_default_hasher, which
from .precalculated import PrecalculatedIndex, load_precalculated_index

__all__ = [
    "BackendConfig",
    "ExternalHasher",
    "Hasher",
    "InProcessHasher",
    "PrecalculatedIndex",
    "compute_cache_key_hash",
    "compute_fingerprint",
    "derive_manifest_name",
    "fingerprint_files",
    "load_precalculated_index",
    "probe_cache_key_hash",
    "probe_default_hasher",
    "record_fields",
    "which",
]
