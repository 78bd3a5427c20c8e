"""Collaborator surface used by a once-only wrapper.

The wrapper owns argument parsing and running the wrapped command. It calls
:func:`fingerprint_invocation` before the run to find the manifest, and
:func:`record_outputs` after a successful run to persist it. On a later run
:func:`check_outputs_still_valid` tells whether the recorded result can be
reused.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from onceonly.config import OnceOnlySettings, build_backend_config
from onceonly.hashing import (
    BackendConfig,
    PrecalculatedIndex,
    derive_manifest_name,
    fingerprint_files,
    load_precalculated_index,
)
from onceonly.manifest import find_first_divergent_output, write_manifest
from onceonly.selection import apply_skip_filters, require_existing_files, select_existing_files
from onceonly.types import FingerprintRecord

logger = logging.getLogger(__name__)

__all__ = [
    "Invocation",
    "check_outputs_still_valid",
    "derive_manifest_name",
    "fingerprint_files",
    "fingerprint_invocation",
    "record_outputs",
    "select_existing_files",
    "write_manifest",
]


@dataclass(frozen=True)
class Invocation:
    """Input fingerprints of one invocation and the manifest they address."""

    inputs: tuple[FingerprintRecord, ...]
    manifest_path: Path
    backend: BackendConfig
    index: PrecalculatedIndex

    @property
    def manifest_exists(self) -> bool:
        return self.manifest_path.is_file()


def fingerprint_invocation(
    raw_args: Sequence[str],
    settings: OnceOnlySettings,
    *,
    backend: BackendConfig | None = None,
) -> Invocation:
    """Select, filter and fingerprint the input files named in *raw_args*."""
    backend = backend or build_backend_config(settings)
    index = load_precalculated_index(settings.precalculated)

    files = apply_skip_filters(
        select_existing_files(raw_args),
        regexes=settings.skip_regex,
        globs=settings.skip_glob,
    )
    inputs = tuple(fingerprint_files(files, index=index, config=backend))
    manifest_path = settings.manifest_path(
        derive_manifest_name(inputs, settings.prefix, factory=backend.cache_key_factory)
    )
    logger.debug("Fingerprinted %d inputs -> %s", len(inputs), manifest_path)
    return Invocation(inputs=inputs, manifest_path=manifest_path, backend=backend, index=index)


def record_outputs(invocation: Invocation, outputs: Iterable[str]) -> tuple[FingerprintRecord, ...]:
    """Fingerprint declared outputs and write the complete manifest."""
    output_files = list(outputs)
    require_existing_files(output_files)
    records = tuple(fingerprint_files(output_files, index=invocation.index, config=invocation.backend))
    write_manifest(invocation.manifest_path, invocation.inputs, records)
    return records


def check_outputs_still_valid(manifest_path: Path, backend: BackendConfig) -> str | None:
    """Return the first divergent output path of a manifest, or None when reuse is safe."""
    return find_first_divergent_output(manifest_path, config=backend)
