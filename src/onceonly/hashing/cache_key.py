"""Cache-key hashing and manifest naming."""

from __future__ import annotations

import functools
import hashlib
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from onceonly.constants.checksum import CACHE_KEY_ALGORITHM
from onceonly.constants.manifest import DEFAULT_MANIFEST_PREFIX, KIND_TO_TOKEN, MANIFEST_SUFFIX
from onceonly.types import FingerprintRecord

logger = logging.getLogger(__name__)

HashFactory: TypeAlias = Callable[[], Any]


def probe_cache_key_hash() -> HashFactory:
    """Return a SHA-1 constructor usable on this interpreter.

    Restricted (FIPS) builds refuse SHA-1 unless it is flagged as not being
    used for security; the digest is identical either way.
    """
    try:
        hashlib.new(CACHE_KEY_ALGORITHM)
    except ValueError:
        logger.warning("Restricted %s, using non-security constructor", CACHE_KEY_ALGORITHM)
        return functools.partial(hashlib.new, CACHE_KEY_ALGORITHM, usedforsecurity=False)
    return functools.partial(hashlib.new, CACHE_KEY_ALGORITHM)


def compute_cache_key_hash(buffer: bytes, factory: HashFactory | None = None) -> str:
    """Return the hex cache-key digest of *buffer*.

    Callers that hash repeatedly should probe once with
    :func:`probe_cache_key_hash` and pass the result as *factory*.
    """
    digest = (factory or probe_cache_key_hash())()
    digest.update(buffer)
    return digest.hexdigest()


def record_fields(record: FingerprintRecord) -> tuple[str, str, str]:
    """Return the textual fields of a record as written to a manifest."""
    return (KIND_TO_TOKEN[record.kind], record.value, record.path)


def derive_manifest_name(
    records: Iterable[FingerprintRecord],
    prefix: str = DEFAULT_MANIFEST_PREFIX,
    *,
    factory: HashFactory | None = None,
) -> str:
    """Name the manifest for an ordered list of input fingerprints.

    Every field of every record is joined with newlines. Record order is part
    of the key.
    """
    buffer = "\n".join(value for record in records for value in record_fields(record))
    return f"{prefix}-{compute_cache_key_hash(buffer.encode('utf-8'), factory)}{MANIFEST_SUFFIX}"
