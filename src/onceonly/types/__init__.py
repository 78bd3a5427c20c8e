"""Shared record types for once-only."""

from .fingerprint import FingerprintRecord, HashKind, Manifest, PrecalculatedEntry

__all__ = [
    "FingerprintRecord",
    "HashKind",
    "Manifest",
    "PrecalculatedEntry",
]
