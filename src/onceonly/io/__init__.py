"""Shared file I/O helpers."""

from .files import file_digest, write_text_atomic

__all__ = ["file_digest", "write_text_atomic"]
