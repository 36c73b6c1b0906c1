"""Environment configuration and validation."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..constants import (
    DEFAULT_MAX_WAIT_TIME_MS,
    DEFAULT_RETRY_INTERVAL_MS,
    MAX_WAIT_TIME_ENV,
    RETRY_INTERVAL_ENV,
)

import logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinderConfig:
    """
    Settings read by the retry engine.

    Attributes:
        max_wait_time: Total polling budget of one find, in milliseconds.
            Zero or negative means a single attempt.
        retry_interval: Pause between attempts, in milliseconds.
    """

    max_wait_time: float = DEFAULT_MAX_WAIT_TIME_MS
    retry_interval: float = DEFAULT_RETRY_INTERVAL_MS

    @property
    def retry_interval_secs(self) -> float:
        return self.retry_interval / 1000.0


def _read_ms(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number of milliseconds, got {raw!r}.")


def get_env_config(dotenv_path: Optional[str] = None) -> FinderConfig:
    """
    Read the finder settings from the environment (a .env file is honored).

    Optional:   NODE_FINDER_MAX_WAIT_TIME (default 3000 ms)
                NODE_FINDER_RETRY_INTERVAL (default 25 ms, must be positive)
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)

    max_wait_time = _read_ms(MAX_WAIT_TIME_ENV, DEFAULT_MAX_WAIT_TIME_MS)
    retry_interval = _read_ms(RETRY_INTERVAL_ENV, DEFAULT_RETRY_INTERVAL_MS)
    if retry_interval <= 0:
        raise EnvironmentError(f"{RETRY_INTERVAL_ENV} must be positive, got {retry_interval}.")

    logger.debug(f"Finder config: max_wait_time={max_wait_time}ms retry_interval={retry_interval}ms")
    return FinderConfig(max_wait_time=max_wait_time, retry_interval=retry_interval)
