"""Read and write the tab-separated fingerprint manifest.

Layout::

    <kind>\t<value>\t<path>      input records
    # OUTPUT
    <kind>\t<value>\t<path>      output records

Other ``#`` lines and blank lines are ignored on read.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from onceonly.constants.manifest import (
    COMMENT_PREFIX,
    FIELD_SEPARATOR,
    MANIFEST_TEMP_PREFIX,
    MANIFEST_TEMP_SUFFIX,
    OUTPUT_SENTINEL,
    RECORD_FIELD_COUNT,
    TOKEN_TO_KIND,
)
from onceonly.exceptions import FileUnavailableError, InvalidManifestFormatError, ManifestWriteError
from onceonly.hashing.cache_key import record_fields
from onceonly.io import write_text_atomic
from onceonly.types import FingerprintRecord, Manifest


def format_record(record: FingerprintRecord) -> str:
    """Render one record as a manifest row without the trailing newline."""
    return FIELD_SEPARATOR.join(record_fields(record))


def parse_record(line: str) -> FingerprintRecord:
    """Parse one manifest row into a record."""
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR, RECORD_FIELD_COUNT - 1)
    if len(fields) != RECORD_FIELD_COUNT or not all(fields):
        raise InvalidManifestFormatError(f"expected <kind><TAB><value><TAB><path>, got {line!r}")
    token, value, path = fields
    kind = TOKEN_TO_KIND.get(token)
    if kind is None:
        raise InvalidManifestFormatError(f"unknown hash kind {token!r}")
    return FingerprintRecord(kind=kind, value=value, path=path)


def render_manifest(
    inputs: Iterable[FingerprintRecord],
    outputs: Iterable[FingerprintRecord] | None = None,
) -> str:
    """Render a manifest document; the output section is present iff *outputs* is given."""
    lines = [format_record(record) for record in inputs]
    if outputs is not None:
        lines.append(OUTPUT_SENTINEL)
        lines.extend(format_record(record) for record in outputs)
    return "".join(f"{line}\n" for line in lines)


def write_manifest(
    path: Path,
    inputs: Iterable[FingerprintRecord],
    outputs: Iterable[FingerprintRecord] | None = None,
) -> None:
    """Persist a manifest atomically."""
    content = render_manifest(inputs, outputs)
    try:
        write_text_atomic(
            path=path,
            content=content,
            temp_prefix=MANIFEST_TEMP_PREFIX,
            temp_suffix=MANIFEST_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise ManifestWriteError(str(path), exc.strerror or str(exc)) from exc


def parse_manifest(text: str, *, source: str = "<manifest>") -> Manifest:
    """Parse manifest text into input and output records, preserving order."""
    inputs: list[FingerprintRecord] = []
    outputs: list[FingerprintRecord] | None = None
    for line_number, line in enumerate(text.splitlines(), start=1):
        if line.rstrip() == OUTPUT_SENTINEL:
            if outputs is None:
                outputs = []
            continue
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        try:
            record = parse_record(line)
        except InvalidManifestFormatError as exc:
            raise InvalidManifestFormatError(f"{source}:{line_number}: {exc}") from exc
        if outputs is None:
            inputs.append(record)
        else:
            outputs.append(record)
    return Manifest(inputs=tuple(inputs), outputs=None if outputs is None else tuple(outputs))


def read_manifest(path: Path) -> Manifest:
    """Load a manifest from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileUnavailableError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise InvalidManifestFormatError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    return parse_manifest(text, source=str(path))
