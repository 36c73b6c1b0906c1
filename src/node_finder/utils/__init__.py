"""Helpers shared across the package."""

from .retry import RetryableFailure, RetryState, RetryEngine, monotonic_ms

__all__ = [
    "monotonic_ms",
    "RetryableFailure",
    "RetryState",
    "RetryEngine",
]
