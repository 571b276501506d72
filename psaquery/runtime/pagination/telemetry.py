"""Structured logging for retrieval operations.

This module provides telemetry hooks for the pagination loop, emitting
structured log records for observability.
"""

from __future__ import annotations

import logging

from .definitions import RetrievalResult, RetrievalState

logger = logging.getLogger(__name__)


def log_retrieval_started(
    *,
    query_label: str,
    max_pages: int,
    max_attempts: int,
) -> None:
    """Log the start of a retrieval.

    Args:
        query_label: Query label (or truncated query text)
        max_pages: Page cap for this retrieval
        max_attempts: Attempts allowed per call
    """
    logger.info(
        "retrieval_started",
        extra={
            "query_label": query_label,
            "max_pages": max_pages,
            "max_attempts": max_attempts,
        },
    )


def log_page_fetched(
    *,
    query_label: str,
    page_index: int,
    records: int,
    total_records: int,
    done: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a single retrieved page.

    Args:
        query_label: Query label
        page_index: Zero-based index of the page
        records: Records in this page
        total_records: Records accumulated so far, this page included
        done: Whether the page reported completion
        latency_ms: Latency of the page call, retries included
    """
    logger.info(
        "page_fetched",
        extra={
            "query_label": query_label,
            "page_index": page_index,
            "records": records,
            "total_records": total_records,
            "done": done,
            "latency_ms": latency_ms,
        },
    )


def log_state_transition(
    *,
    query_label: str,
    from_state: RetrievalState,
    to_state: RetrievalState,
) -> None:
    logger.debug(
        "retrieval_state",
        extra={
            "query_label": query_label,
            "from_state": from_state.value,
            "to_state": to_state.value,
        },
    )


def log_retrieval_complete(
    *,
    query_label: str,
    result: RetrievalResult,
) -> None:
    """Log completion of a retrieval.

    Args:
        query_label: Query label
        result: RetrievalResult of the retrieval
    """
    logger.info(
        "retrieval_complete",
        extra={
            "query_label": query_label,
            "pages_fetched": result.pages_fetched,
            "calls_made": result.calls_made,
            "total_records": result.total_records,
            "elapsed_ms": result.elapsed_ms,
        },
    )


def log_retrieval_failed(
    *,
    query_label: str,
    pages_completed: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a retrieval that ended in a terminal error.

    Args:
        query_label: Query label
        pages_completed: Pages retrieved before the failure
        error_type: Type of error (e.g., "RetrievalExhausted", "MalformedPage")
        error_message: Error message
    """
    logger.error(
        "retrieval_failed",
        extra={
            "query_label": query_label,
            "pages_completed": pages_completed,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
