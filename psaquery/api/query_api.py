"""Retrieval entry points.

``retrieve`` is the single operation downstream code (report builders,
exporters) uses to turn a query into its complete record list. ``QueryAPI``
wraps it with a connector, default retry settings and the canned record
queries.

Architecture:
    This module implements the Facade pattern over the runtime layer:
    - retrieve() wires RetryPolicy -> PageFetcher -> PaginationLoop
    - QueryAPI resolves defaults and owns the connector lifecycle

Design Decisions:
    - Service injection allows testing with stub services
    - Retry configuration is a per-call value with named presets
    - Context manager pattern ensures the HTTP session is closed
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from ..connectors.psa import PSARESTConnector
from ..core.config import DEFAULT_MAX_PAGES, QUERY_RETRY, RetryConfig
from ..models import Query
from ..runtime.pagination import PageFetcher, PageHint, PaginationLoop, QueryService
from ..runtime.retry import RetryPolicy
from .query_builder import build_project_query, build_timecard_query

logger = logging.getLogger(__name__)


async def retrieve(
    query: Query,
    retry_config: RetryConfig = QUERY_RETRY,
    *,
    service: QueryService,
    max_pages: int = DEFAULT_MAX_PAGES,
    hint: PageHint | None = None,
    cancel_event: asyncio.Event | None = None,
    timeout: float | None = None,
) -> list[Mapping[str, Any]]:
    """Retrieve every record of a query.

    Args:
        query: Query to run
        retry_config: Retry budget for each page call
        service: Query service to read from
        max_pages: Page cap for this retrieval
        hint: Optional field names for parsing page responses
        cancel_event: Optional event that stops the retrieval before the next page
        timeout: Optional deadline in seconds, checked before each page

    Returns:
        All records, in the order the pages and their records arrived

    Raises:
        RetrievalError: MalformedPage, RetrievalExhausted, RetrievalAborted,
            TooManyPages or RetrievalCancelled
    """
    fetcher = PageFetcher(service, RetryPolicy(retry_config), hint)
    loop = PaginationLoop(fetcher, max_pages=max_pages, max_attempts=retry_config.max_attempts)
    result = await loop.run(query, cancel_event=cancel_event, timeout=timeout)
    return result.records


class QueryAPI:
    """High-level facade for PSA record retrieval.

    Example:
        >>> async with QueryAPI(instance_url=url, access_token=token) as api:
        ...     timecards = await api.query_timecards("OP-1234", start, end)
    """

    def __init__(
        self,
        service: QueryService | None = None,
        *,
        instance_url: str | None = None,
        access_token: str | None = None,
        retry_config: RetryConfig = QUERY_RETRY,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        """Initialize the facade.

        Args:
            service: Query service to use (a PSARESTConnector is created if omitted)
            instance_url: Service instance URL, required without ``service``
            access_token: Bearer token, required without ``service``
            retry_config: Default retry configuration
            max_pages: Default page cap
        """
        if service is None:
            if not instance_url or not access_token:
                raise ValueError(
                    "instance_url and access_token are required when no service is given"
                )
            service = PSARESTConnector(instance_url, access_token)
            self._owns_service = True
        else:
            self._owns_service = False
        self._service = service
        self._retry_config = retry_config
        self._max_pages = max_pages

    @property
    def service(self) -> QueryService:
        return self._service

    async def retrieve(
        self,
        query: Query,
        retry_config: RetryConfig | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> list[Mapping[str, Any]]:
        """Retrieve every record of ``query`` with the facade's defaults."""
        return await retrieve(
            query,
            retry_config or self._retry_config,
            service=self._service,
            max_pages=self._max_pages,
            cancel_event=cancel_event,
            timeout=timeout,
        )

    async def query_timecards(
        self,
        opportunity_number: str,
        start_date: date | datetime,
        end_date: date | datetime,
    ) -> list[Mapping[str, Any]]:
        """Retrieve billable timecards of an opportunity within a date range."""
        query = build_timecard_query(opportunity_number, start_date, end_date)
        records = await self.retrieve(query)
        logger.info(f"Retrieved {len(records)} timecards for {query.label}")
        return records

    async def query_projects(self, opportunity_number: str) -> list[Mapping[str, Any]]:
        """Retrieve the projects linked to an opportunity."""
        query = build_project_query(opportunity_number)
        records = await self.retrieve(query)
        logger.info(f"Retrieved {len(records)} projects for {query.label}")
        return records

    async def close(self) -> None:
        """Close the connector if this facade created it."""
        if self._owns_service:
            await self._service.close()  # type: ignore[attr-defined]

    async def __aenter__(self) -> QueryAPI:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
