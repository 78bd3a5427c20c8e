"""Load precalculated md5sum-style listings into an index keyed by absolute path."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import TypeAlias

from onceonly.constants.checksum import PRECALCULATED_EXTENSION
from onceonly.exceptions import FileUnavailableError, InvalidInputError, InvalidManifestFormatError
from onceonly.types import PrecalculatedEntry

logger = logging.getLogger(__name__)

PrecalculatedIndex: TypeAlias = dict[str, PrecalculatedEntry]


def load_precalculated_index(listing_files: Iterable[str | Path]) -> PrecalculatedIndex:
    """Build the precalculated index from listing files, later listings winning.

    Each listing holds ``<hash> <filename>`` per line with filenames relative to
    the listing's own directory. Every entry is stamped with the listing's
    mtime; see :meth:`PrecalculatedEntry.is_fresh_for`.
    """
    index: PrecalculatedIndex = {}
    for listing in listing_files:
        index.update(_load_listing(Path(listing)))
    return index


def _load_listing(listing: Path) -> PrecalculatedIndex:
    if listing.suffix != PRECALCULATED_EXTENSION:
        raise InvalidInputError(
            f"Precalculated hash file should have {PRECALCULATED_EXTENSION} extension: {listing}"
        )

    try:
        source_mtime_ns = listing.stat().st_mtime_ns
        text = listing.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileUnavailableError(str(listing), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise InvalidManifestFormatError(f"{listing}: not valid UTF-8 ({exc.reason})") from exc

    directory = listing.parent
    entries: PrecalculatedIndex = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise InvalidManifestFormatError(f"{listing}:{line_number}: expected '<hash> <filename>', got {line!r}")
        hash_value, filename = fields[0], fields[1]
        target = os.path.abspath(directory / filename)
        entries[target] = PrecalculatedEntry(path=target, hash_value=hash_value, source_mtime_ns=source_mtime_ns)

    logger.debug("Loaded %d precalculated entries from %s", len(entries), listing)
    return entries
