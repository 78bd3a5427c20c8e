"""Constants for the on-disk manifest format."""

from __future__ import annotations

from typing import Final

from onceonly.types.fingerprint import HashKind

DEFAULT_MANIFEST_PREFIX: str = "once-only"
MANIFEST_SUFFIX: str = ".txt"
MANIFEST_TEMP_PREFIX: str = ".once-only-"
MANIFEST_TEMP_SUFFIX: str = ".tmp"

OUTPUT_SENTINEL: str = "# OUTPUT"
COMMENT_PREFIX: str = "#"
FIELD_SEPARATOR: str = "\t"
RECORD_FIELD_COUNT: int = 3

# Precalculated listings are md5sum output, so they share the MD5 token.
KIND_TO_TOKEN: Final[dict[HashKind, str]] = {
    "default": "MD5",
    "large": "PFFF",
    "precalculated": "MD5",
}
TOKEN_TO_KIND: Final[dict[str, HashKind]] = {
    "MD5": "default",
    "PFFF": "large",
}
