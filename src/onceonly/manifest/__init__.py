"""Manifest persistence and output verification."""

from .codec import format_record, parse_manifest, parse_record, read_manifest, render_manifest, write_manifest
from .verify import find_first_divergent_output

__all__ = [
    "find_first_divergent_output",
    "format_record",
    "parse_manifest",
    "parse_record",
    "read_manifest",
    "render_manifest",
    "write_manifest",
]
