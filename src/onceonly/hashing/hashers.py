"""Hasher capability: in-process digests and external hash tools.

A hasher turns one file into a digest token. The default hasher is chosen
once at startup by :func:`probe_default_hasher` and injected into the
checksum backend through :class:`~onceonly.hashing.backend.BackendConfig`.
"""

from __future__ import annotations

import hashlib
import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from onceonly.constants.checksum import DEFAULT_DIGEST_ALGORITHM, EXTERNAL_MD5_TOOL
from onceonly.exceptions import ConfigError, ExternalHasherFailureError, FileUnavailableError
from onceonly.io import file_digest

logger = logging.getLogger(__name__)


class Hasher(Protocol):
    """Computes a digest token for a single file."""

    @property
    def name(self) -> str: ...

    def digest(self, path: Path) -> str: ...


@dataclass(frozen=True)
class InProcessHasher:
    """Digest file bytes with :mod:`hashlib`."""

    algorithm: str = DEFAULT_DIGEST_ALGORITHM

    @property
    def name(self) -> str:
        return self.algorithm

    def digest(self, path: Path) -> str:
        try:
            return file_digest(path, self.algorithm)
        except OSError as exc:
            raise FileUnavailableError(str(path), exc.strerror or str(exc)) from exc


@dataclass(frozen=True)
class ExternalHasher:
    """Run ``<tool> <absolute path>`` and take the first output token as the digest."""

    tool: str
    timeout_seconds: float | None = None

    @property
    def name(self) -> str:
        return self.tool

    def digest(self, path: Path) -> str:
        target = str(path.absolute())
        try:
            completed = subprocess.run(
                [self.tool, target],
                capture_output=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExternalHasherFailureError(self.tool, target, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise ExternalHasherFailureError(self.tool, target, f"could not start ({exc})") from exc

        if completed.returncode != 0:
            detail = completed.stderr.decode("utf-8", "replace").strip() or "no stderr"
            raise ExternalHasherFailureError(self.tool, target, f"exit status {completed.returncode}: {detail}")

        tokens = completed.stdout.split()
        if not tokens:
            raise ExternalHasherFailureError(self.tool, target, "produced no digest")
        try:
            return tokens[0].decode("ascii")
        except UnicodeDecodeError as exc:
            raise ExternalHasherFailureError(self.tool, target, f"unparsable digest {tokens[0]!r}") from exc


def which(binary: str) -> str | None:
    """Return the full path of *binary* on ``PATH``, or None."""
    return shutil.which(binary)


def in_process_digest_available(algorithm: str = DEFAULT_DIGEST_ALGORITHM) -> bool:
    """Return True when :mod:`hashlib` can construct *algorithm* on this interpreter."""
    try:
        hashlib.new(algorithm)
    except ValueError:
        return False
    return True


def probe_default_hasher(timeout_seconds: float | None = None) -> Hasher:
    """Select the default-size hasher once, preferring an in-process digest."""
    if in_process_digest_available():
        return InProcessHasher()

    tool = which(EXTERNAL_MD5_TOOL)
    if tool is None:
        raise ConfigError(
            f"No in-process {DEFAULT_DIGEST_ALGORITHM} digest available and {EXTERNAL_MD5_TOOL} not found on PATH"
        )
    logger.warning("In-process %s unavailable, using %s", DEFAULT_DIGEST_ALGORITHM, tool)
    return ExternalHasher(tool, timeout_seconds=timeout_seconds)
