"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

import os

# ============================================================================
# Retry Configuration
# ============================================================================

DEFAULT_MAX_WAIT_TIME_MS = 3000
"""How long a find keeps polling before its failure becomes terminal."""

DEFAULT_RETRY_INTERVAL_MS = 25
"""Pause between two resolution attempts."""

MAX_WAIT_TIME_ENV = "NODE_FINDER_MAX_WAIT_TIME"
RETRY_INTERVAL_ENV = "NODE_FINDER_RETRY_INTERVAL"


# ============================================================================
# Feature Flags
# ============================================================================

LOG_RETRIES = os.getenv("NODE_FINDER_LOG_RETRIES", "0") == "1"
"""Log every retried attempt at DEBUG level, not only the terminal one."""


__all__ = [
    "DEFAULT_MAX_WAIT_TIME_MS",
    "DEFAULT_RETRY_INTERVAL_MS",
    "MAX_WAIT_TIME_ENV",
    "RETRY_INTERVAL_ENV",
    "LOG_RETRIES",
]
