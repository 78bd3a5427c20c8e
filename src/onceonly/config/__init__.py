"""Configuration loading and normalization for once-only."""

from __future__ import annotations

from onceonly.config.loader import build_backend_config, load_config
from onceonly.config.model import OnceOnlySettings

__all__ = [
    "OnceOnlySettings",
    "build_backend_config",
    "load_config",
]
