"""Cursor-following pagination loop.

This module provides the PaginationLoop class that runs one retrieval: it
requests the first page of a query, then follows the continuation token of
each page until the service reports completion.

Pages are strictly sequential. The request for page n+1 needs the cursor of
page n, so there is never more than one request in flight per retrieval.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable
from time import perf_counter

from ...core.config import DEFAULT_MAX_PAGES
from ...core.exceptions import RetrievalCancelled, RetrievalError, TooManyPages
from ...models import Page, Query
from .accumulator import ResultAccumulator
from .definitions import RetrievalResult, RetrievalState
from .fetcher import PageFetcher
from .telemetry import (
    log_page_fetched,
    log_retrieval_complete,
    log_retrieval_failed,
    log_retrieval_started,
    log_state_transition,
)


class PaginationLoop:
    """Retrieves every page of a query and accumulates the records.

    A failure at any point aborts the whole retrieval: records already
    accumulated are discarded and the error carries the number of pages
    completed before it happened.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        max_attempts: int = 0,
    ) -> None:
        """Initialize pagination loop.

        Args:
            fetcher: Page fetcher used for every call
            max_pages: Maximum pages per retrieval before failing
            max_attempts: Attempts per call, reported in telemetry only
        """
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self._fetcher = fetcher
        self._max_pages = max_pages
        self._max_attempts = max_attempts

    @property
    def max_pages(self) -> int:
        return self._max_pages

    async def run(
        self,
        query: Query,
        *,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> RetrievalResult:
        """Run one retrieval to completion.

        Args:
            query: Query to retrieve
            cancel_event: Optional event; once set, no further page is requested
            timeout: Optional deadline in seconds from now, checked before
                each page request

        Returns:
            RetrievalResult with all records in page-arrival order

        Raises:
            MalformedPage: If a page is not done but carries no cursor
            RetrievalExhausted: If a call failed on every attempt
            RetrievalAborted: If a call failed with a non-retryable error
            TooManyPages: If the service reports more pages than max_pages
            RetrievalCancelled: If cancel_event was set or the deadline passed
        """
        label = query.label or query.text[:80]
        deadline = time.monotonic() + timeout if timeout is not None else None
        accumulator = ResultAccumulator()
        pages = 0
        state = RetrievalState.START
        started = perf_counter()

        log_retrieval_started(
            query_label=label,
            max_pages=self._max_pages,
            max_attempts=self._max_attempts,
        )

        try:
            self._check_cancelled(cancel_event, deadline)
            state = self._transition(label, state, RetrievalState.FETCHING)
            page = await self._fetch(label, accumulator, self._fetcher.fetch_first(query))
            pages += 1

            while not page.done:
                state = self._transition(label, state, RetrievalState.CONTINUING)
                self._check_cancelled(cancel_event, deadline)
                if pages >= self._max_pages:
                    raise TooManyPages(
                        f"Query still reports more results after {pages} pages "
                        f"(limit {self._max_pages})",
                        max_pages=self._max_pages,
                    )
                assert page.cursor is not None
                state = self._transition(label, state, RetrievalState.FETCHING)
                page = await self._fetch(
                    label,
                    accumulator,
                    self._fetcher.fetch_next(page.cursor, index=pages),
                )
                pages += 1

            state = self._transition(label, state, RetrievalState.FINISHED)
        except RetrievalError as e:
            e.pages_completed = pages
            self._transition(label, state, RetrievalState.FAILED)
            log_retrieval_failed(
                query_label=label,
                pages_completed=pages,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        result = RetrievalResult(
            records=accumulator.collect(),
            pages_fetched=pages,
            calls_made=pages,
            elapsed_ms=(perf_counter() - started) * 1000.0,
        )
        log_retrieval_complete(query_label=label, result=result)
        return result

    async def _fetch(
        self, label: str, accumulator: ResultAccumulator, call: Awaitable[Page]
    ) -> Page:
        page_start = perf_counter()
        page: Page = await call
        accumulator.append(page.records)
        log_page_fetched(
            query_label=label,
            page_index=page.index,
            records=page.record_count,
            total_records=len(accumulator),
            done=page.done,
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return page

    @staticmethod
    def _check_cancelled(cancel_event: asyncio.Event | None, deadline: float | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise RetrievalCancelled("Retrieval cancelled before the next page request")
        if deadline is not None and time.monotonic() >= deadline:
            raise RetrievalCancelled("Retrieval deadline passed before the next page request")

    @staticmethod
    def _transition(
        label: str, from_state: RetrievalState, to_state: RetrievalState
    ) -> RetrievalState:
        log_state_transition(query_label=label, from_state=from_state, to_state=to_state)
        return to_state
