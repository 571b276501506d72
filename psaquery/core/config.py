"""Retry configuration and named presets.

Retry behaviour is passed into each retrieval as a value rather than read
from process-wide constants, so different callers can use different budgets.

Presets:
    QUERY_RETRY: 3 attempts, 1 second apart (record queries)
    EXPORT_RETRY: 5 attempts, 3 seconds apart (report export retrieval)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .exceptions import PermanentCallFailure

# Upper bound on pages per retrieval
DEFAULT_MAX_PAGES = 10_000


def is_retryable(error: BaseException) -> bool:
    """Decide whether a failed call is worth repeating.

    Unclassified errors are retried. Only failures the service client has
    explicitly marked as permanent are not.

    Args:
        error: Exception raised by the failed attempt

    Returns:
        True if the call should be attempted again
    """
    return not isinstance(error, PermanentCallFailure)


@dataclass(frozen=True)
class RetryConfig:
    """Bounded retry configuration for a single network call.

    Attributes:
        max_attempts: Total attempts including the first one
        delay: Fixed pause between attempts, in seconds
        retry_if: Predicate deciding whether a failure is retried
    """

    max_attempts: int = 3
    delay: float = 1.0
    retry_if: Callable[[BaseException], bool] = field(default=is_retryable, compare=False)

    def __post_init__(self) -> None:
        """Validate retry configuration."""
        if self.max_attempts < 1:
            raise ValueError("RetryConfig max_attempts must be at least 1")
        if self.delay < 0:
            raise ValueError("RetryConfig delay cannot be negative")

    @property
    def delay_ms(self) -> int:
        """Delay between attempts in milliseconds."""
        return int(self.delay * 1000)


QUERY_RETRY = RetryConfig(max_attempts=3, delay=1.0)
EXPORT_RETRY = RetryConfig(max_attempts=5, delay=3.0)
