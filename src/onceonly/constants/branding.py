"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "once-only"
CLI_PROG: str = "once-only-check"
CLI_DESCRIPTION: str = f"{BRAND_NAME} change detection: fingerprint inputs and verify recorded outputs"
ERROR_PREFIX: str = "ERROR:"

EXIT_OK: int = 0
EXIT_FATAL: int = 1
EXIT_CONFIG_ERROR: int = 2
EXIT_OUTPUTS_DIVERGED: int = 3
