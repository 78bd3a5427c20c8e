"""Derive real file paths from raw command arguments and filter them."""

from __future__ import annotations

import glob
import logging
import os
import re
from collections.abc import Iterable, Sequence

from onceonly.exceptions import ConfigError, FileUnavailableError

logger = logging.getLogger(__name__)


def select_existing_files(raw_args: Iterable[str]) -> list[str]:
    """Return the arguments that name existing regular files, in their original order.

    Arguments shaped like ``-in=file`` are resolved through the part after the
    first ``=``. Anything that does not resolve is dropped silently.
    """
    selected: list[str] = []
    for arg in raw_args:
        filename = _existing_filename(arg)
        if filename is not None:
            selected.append(filename)
    return selected


def require_existing_files(files: Iterable[str]) -> None:
    """Raise ``FileUnavailableError`` for the first file that does not exist."""
    for filename in files:
        if not os.path.exists(filename):
            raise FileUnavailableError(filename)


def filter_file_list(files: Sequence[str], pattern: str | re.Pattern[str]) -> tuple[list[str], list[str]]:
    """Partition *files* into (kept, excluded) by a regular expression.

    An entry is excluded when either its basename or the full string matches.
    """
    try:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as exc:
        raise ConfigError(f"Invalid skip regex {pattern!r}: {exc}") from exc

    kept: list[str] = []
    excluded: list[str] = []
    for name in files:
        if regex.search(os.path.basename(name)) or regex.search(name):
            excluded.append(name)
        else:
            kept.append(name)
    return kept, excluded


def filter_file_list_by_glob(files: Sequence[str], glob_pattern: str) -> tuple[list[str], list[str]]:
    """Partition *files* into (kept, excluded) by membership in a glob expansion."""
    expansion = frozenset(glob.glob(glob_pattern))
    kept: list[str] = []
    excluded: list[str] = []
    for name in files:
        if name in expansion:
            excluded.append(name)
        else:
            kept.append(name)
    return kept, excluded


def apply_skip_filters(
    files: Sequence[str],
    *,
    regexes: Sequence[str] = (),
    globs: Sequence[str] = (),
) -> list[str]:
    """Drop files matching any configured skip regex, then any skip glob."""
    kept = list(files)
    for pattern in regexes:
        kept, excluded = filter_file_list(kept, pattern)
        for name in excluded:
            logger.debug("Skipping %s (regex %s)", name, pattern)
    for glob_pattern in globs:
        kept, excluded = filter_file_list_by_glob(kept, glob_pattern)
        for name in excluded:
            logger.debug("Skipping %s (glob %s)", name, glob_pattern)
    return kept


def _existing_filename(arg: str) -> str | None:
    if os.path.isfile(arg):
        return arg
    _, sep, filename = arg.partition("=")
    if sep and filename and os.path.isfile(filename):
        return filename
    return None
