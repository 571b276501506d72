"""Bounded retry around a single network call.

Every failure the configured predicate accepts is retried after a fixed
delay until the attempt budget is spent. The delay is awaited, so the
retrieval waits while the event loop stays free for unrelated work.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from ..core.config import RetryConfig
from ..core.exceptions import RetrievalAborted, RetrievalExhausted

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryAttempt:
    """Bookkeeping for one failed attempt.

    Attributes:
        number: 1-based attempt number
        error: Exception raised by this attempt
    """

    number: int
    error: BaseException


class RetryPolicy:
    """Executes an async operation with bounded, fixed-delay retries."""

    def __init__(
        self,
        config: RetryConfig,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize retry policy.

        Args:
            config: Attempt budget, delay and retry predicate
            sleep: Awaitable used for the pause between attempts
        """
        self._config = config
        self._sleep = sleep

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        description: str = "call",
    ) -> T:
        """Run operation, retrying failures up to the attempt budget.

        The operation is called again from scratch on each attempt, so it
        must be safe to repeat.

        Args:
            operation: Zero-argument coroutine function performing the call
            description: Short name of the call for log records

        Returns:
            Result of the first successful attempt

        Raises:
            RetrievalExhausted: If all max_attempts attempts failed
            RetrievalAborted: If a failure was classified as not retryable
        """
        max_attempts = self._config.max_attempts
        last: RetryAttempt | None = None

        for number in range(1, max_attempts + 1):
            try:
                return await operation()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                last = RetryAttempt(number=number, error=e)

            if not self._config.retry_if(last.error):
                logger.error(
                    "attempt_not_retryable",
                    extra={
                        "operation": description,
                        "attempt": last.number,
                        "error_type": type(last.error).__name__,
                        "error_message": str(last.error),
                    },
                )
                raise RetrievalAborted(
                    f"{description} failed with a non-retryable error: {last.error}",
                    attempts=last.number,
                    last_error=last.error,
                ) from last.error

            logger.warning(
                "attempt_failed",
                extra={
                    "operation": description,
                    "attempt": last.number,
                    "max_attempts": max_attempts,
                    "error_type": type(last.error).__name__,
                    "error_message": str(last.error),
                },
            )

            if number < max_attempts:
                logger.info(
                    f"Retrying {description} in {self._config.delay_ms}ms "
                    f"(attempt {number + 1}/{max_attempts})"
                )
                await self._sleep(self._config.delay)

        assert last is not None
        raise RetrievalExhausted(
            f"{description} failed after {max_attempts} attempts. Last error: {last.error}",
            attempts=max_attempts,
            last_error=last.error,
        ) from last.error
