"""Bounded polling of resolution attempts."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from ..config.environment import FinderConfig
from ..constants import LOG_RETRIES

import logging
logger = logging.getLogger(__name__)

T = TypeVar("T")


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class RetryableFailure(ABC):
    """
    Returned (not raised) by an attempt that may succeed later.

    Subclasses turn themselves into the terminal exception once the wait
    budget is spent.
    """

    @abstractmethod
    def to_error(self) -> Exception:
        ...


@dataclass
class RetryState:
    """Start time and budget of one retry loop, both in milliseconds."""

    started_at: int
    budget: float

    def elapsed(self, now: int) -> int:
        return now - self.started_at

    def exhausted(self, now: int) -> bool:
        return self.elapsed(now) >= self.budget


class RetryEngine:
    """
    Re-run an attempt until it stops returning a RetryableFailure.

    The budget is fixed when the engine is built. Each call to ``run`` keeps a
    single start time, so waiting is cumulative across attempts. Exceptions
    raised by the attempt itself are not retried.
    """

    def __init__(
        self,
        max_wait_time: float,
        interval: float = 0.025,
        clock: Callable[[], int] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            max_wait_time: Budget in milliseconds
            interval: Pause between attempts in seconds (default: 25 ms)
            clock: Monotonic clock returning integer milliseconds
            sleep: Blocking sleep taking seconds
        """
        self.max_wait_time = max_wait_time
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

    @classmethod
    def from_config(cls, config: FinderConfig, **kwargs) -> "RetryEngine":
        return cls(config.max_wait_time, interval=config.retry_interval_secs, **kwargs)

    def run(self, attempt: Callable[[], Union[T, RetryableFailure]], description: Optional[str] = None) -> T:
        """
        Call ``attempt`` until it succeeds or the budget is spent.

        Returns:
            The first result that is not a RetryableFailure

        Raises:
            The terminal error of the last failed attempt
        """
        state = RetryState(started_at=self._clock(), budget=self.max_wait_time)
        attempts = 0
        while True:
            result = attempt()
            attempts += 1
            if not isinstance(result, RetryableFailure):
                return result

            now = self._clock()
            if state.exhausted(now):
                logger.debug(
                    f"Giving up on {description or 'attempt'} after {attempts} tries "
                    f"({state.elapsed(now)}ms)"
                )
                raise result.to_error()

            if LOG_RETRIES:
                logger.debug(f"Retrying {description or 'attempt'} ({attempts}): {result}")
            self._sleep(self.interval)


__all__ = [
    "monotonic_ms",
    "RetryableFailure",
    "RetryState",
    "RetryEngine",
]
