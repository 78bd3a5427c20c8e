"""Detect output files that drifted since their manifest was written."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from onceonly.exceptions import FileUnavailableError
from onceonly.hashing.backend import BackendConfig
from onceonly.manifest.codec import read_manifest

logger = logging.getLogger(__name__)


def find_first_divergent_output(manifest_path: Path, *, config: BackendConfig) -> str | None:
    """Return the first recorded output that is missing or changed, else None.

    Outputs are re-hashed with the backend that produced their record. A
    manifest without an output section has nothing to diverge.
    """
    manifest = read_manifest(manifest_path)
    for record in manifest.outputs or ():
        if not os.path.exists(record.path):
            logger.debug("Output missing: %s", record.path)
            return record.path

        hasher = config.hasher_for(record.kind)
        try:
            current = hasher.digest(Path(record.path))
        except FileUnavailableError:
            logger.debug("Output unreadable: %s", record.path)
            return record.path

        if current != record.value:
            logger.debug("Output changed: %s (%s != %s)", record.path, current, record.value)
            return record.path
    return None
