"""Resilient paginated retrieval.

This module provides the cursor-following retrieval engine shared by every
caller that needs a complete result set.

Architecture:
    The pagination layer consists of:
    - definitions.py: Service contract, page hints, states and results
    - fetcher.py: First/continuation page calls through the retry policy
    - loop.py: Cursor-following loop with page cap and cancellation
    - accumulator.py: Order-preserving record accumulation
    - telemetry.py: Structured logging

Usage:
    fetcher = PageFetcher(service, RetryPolicy(QUERY_RETRY))
    result = await PaginationLoop(fetcher).run(query)
"""

from __future__ import annotations

from .accumulator import ResultAccumulator
from .definitions import PageHint, QueryService, RetrievalResult, RetrievalState
from .fetcher import PageFetcher, parse_page
from .loop import PaginationLoop

__all__ = [
    "PageHint",
    "QueryService",
    "RetrievalResult",
    "RetrievalState",
    "PageFetcher",
    "parse_page",
    "PaginationLoop",
    "ResultAccumulator",
]
