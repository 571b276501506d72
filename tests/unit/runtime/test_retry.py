"""Unit tests for RetryPolicy."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from psaquery.core import (
    PermanentCallFailure,
    RetrievalAborted,
    RetrievalExhausted,
    RetryConfig,
    TransientCallFailure,
)
from psaquery.runtime import RetryPolicy


def failing_then(result, failures: int):
    """Build an operation that fails ``failures`` times, then returns result."""
    calls = {"count": 0}

    async def operation():
        calls["count"] += 1
        if calls["count"] <= failures:
            raise TransientCallFailure(f"failure {calls['count']}")
        return result

    return operation, calls


class TestRetryPolicy:
    """Test RetryPolicy attempt accounting and delays."""

    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self):
        sleep = AsyncMock()
        policy = RetryPolicy(RetryConfig(max_attempts=3, delay=1.0), sleep=sleep)
        operation, calls = failing_then("ok", failures=0)

        assert await policy.execute(operation) == "ok"
        assert calls["count"] == 1
        sleep.assert_not_called()

    @pytest.mark.asyncio
    async def test_succeeds_on_attempt_k(self):
        """Fails on attempts 1..k-1, succeeds on k: exactly k attempts."""
        sleep = AsyncMock()
        policy = RetryPolicy(RetryConfig(max_attempts=5, delay=1.0), sleep=sleep)
        operation, calls = failing_then({"records": []}, failures=2)

        result = await policy.execute(operation)

        assert result == {"records": []}
        assert calls["count"] == 3
        assert sleep.await_count == 2
        sleep.assert_awaited_with(1.0)

    @pytest.mark.asyncio
    async def test_exhausts_after_max_attempts(self):
        """Every attempt fails: exactly max_attempts attempts, last error wrapped."""
        sleep = AsyncMock()
        policy = RetryPolicy(RetryConfig(max_attempts=3, delay=1.0), sleep=sleep)
        operation, calls = failing_then("never", failures=10)

        with pytest.raises(RetrievalExhausted) as exc_info:
            await policy.execute(operation, description="query")

        error = exc_info.value
        assert calls["count"] == 3
        assert error.attempts == 3
        assert str(error.last_error) == "failure 3"
        assert error.__cause__ is error.last_error
        # No pause after the final attempt
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_single_attempt_config_never_sleeps(self):
        sleep = AsyncMock()
        policy = RetryPolicy(RetryConfig(max_attempts=1, delay=5.0), sleep=sleep)
        operation, calls = failing_then("never", failures=1)

        with pytest.raises(RetrievalExhausted) as exc_info:
            await policy.execute(operation)

        assert exc_info.value.attempts == 1
        assert calls["count"] == 1
        sleep.assert_not_called()

    @pytest.mark.asyncio
    async def test_untyped_errors_are_retried(self):
        policy = RetryPolicy(RetryConfig(max_attempts=2, delay=0.0))
        calls = {"count": 0}

        async def operation():
            calls["count"] += 1
            if calls["count"] == 1:
                raise RuntimeError("socket closed")
            return "ok"

        assert await policy.execute(operation) == "ok"
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_permanent_error_aborts_without_retry(self):
        sleep = AsyncMock()
        policy = RetryPolicy(RetryConfig(max_attempts=3, delay=1.0), sleep=sleep)
        operation = AsyncMock(side_effect=PermanentCallFailure("MALFORMED_QUERY", status_code=400))

        with pytest.raises(RetrievalAborted) as exc_info:
            await policy.execute(operation)

        assert exc_info.value.attempts == 1
        assert isinstance(exc_info.value.last_error, PermanentCallFailure)
        assert operation.await_count == 1
        sleep.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_predicate(self):
        """A predicate that retries nothing aborts on the first failure."""
        config = RetryConfig(max_attempts=3, delay=0.0, retry_if=lambda e: False)
        policy = RetryPolicy(config)
        operation, calls = failing_then("never", failures=5)

        with pytest.raises(RetrievalAborted):
            await policy.execute(operation)
        assert calls["count"] == 1

    @pytest.mark.asyncio
    async def test_cancellation_is_not_retried(self):
        policy = RetryPolicy(RetryConfig(max_attempts=3, delay=0.0))
        operation = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await policy.execute(operation)
        assert operation.await_count == 1

    @pytest.mark.asyncio
    async def test_failed_attempts_are_logged(self, caplog):
        policy = RetryPolicy(RetryConfig(max_attempts=2, delay=0.0))
        operation, _ = failing_then("ok", failures=1)

        with caplog.at_level(logging.WARNING, logger="psaquery.runtime.retry"):
            await policy.execute(operation, description="query_more")

        failed = [r for r in caplog.records if r.getMessage() == "attempt_failed"]
        assert len(failed) == 1
        assert failed[0].attempt == 1
        assert failed[0].operation == "query_more"
