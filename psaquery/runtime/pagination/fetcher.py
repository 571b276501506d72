"""Page fetching: one service call through the retry policy, parsed to a Page."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.exceptions import MalformedPage
from ...models import Page, Query
from ..retry import RetryPolicy
from .definitions import PageHint, QueryService


def parse_page(
    response: Mapping[str, Any] | None,
    *,
    index: int = 0,
    hint: PageHint | None = None,
) -> Page:
    """Parse a raw service response into a Page.

    A missing response or missing records field yields an empty page. Only an
    explicit ``done: false`` means more pages follow; in that case a
    continuation token is mandatory.

    Args:
        response: Raw response mapping (or None)
        index: Zero-based page index within the retrieval
        hint: Field names to read (default: records/done/nextRecordsUrl)

    Returns:
        Parsed Page

    Raises:
        MalformedPage: If the page is not done but carries no cursor
    """
    hint = hint or PageHint()
    if response is None:
        return Page(index=index)

    records = response.get(hint.records_field) or []
    done = response.get(hint.done_field) is not False

    cursor: str | None = None
    if not done:
        cursor = response.get(hint.cursor_field)
        if not cursor:
            raise MalformedPage(
                f"Page {index} reported more results but has no '{hint.cursor_field}'",
                page_index=index,
            )

    return Page(records=tuple(records), done=done, cursor=cursor, index=index)


class PageFetcher:
    """Fetches first and continuation pages from a query service."""

    def __init__(
        self,
        service: QueryService,
        retry_policy: RetryPolicy,
        hint: PageHint | None = None,
    ) -> None:
        """Initialize page fetcher.

        Args:
            service: Query service exposing query() and query_more()
            retry_policy: Retry policy wrapped around every call
            hint: Optional field names for parsing responses
        """
        self._service = service
        self._retry = retry_policy
        self._hint = hint or PageHint()

    async def fetch_first(self, query: Query) -> Page:
        """Run the query and return its first page."""
        response = await self._retry.execute(
            lambda: self._service.query(query.text),
            description="query",
        )
        return parse_page(response, index=0, hint=self._hint)

    async def fetch_next(self, cursor: str, *, index: int) -> Page:
        """Fetch the page that follows ``cursor``.

        Args:
            cursor: Continuation token returned with the previous page
            index: Zero-based index of the page being fetched
        """
        response = await self._retry.execute(
            lambda: self._service.query_more(cursor),
            description="query_more",
        )
        return parse_page(response, index=index, hint=self._hint)
