"""Pagination metadata definitions and result structures.

This module defines the service contract the pagination engine consumes,
hints for reading page responses, the retrieval state machine and the
result of a finished retrieval.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class QueryService(Protocol):
    """Query service the pagination engine reads from.

    Any object with these two coroutines works, so tests can pass a plain
    stub and production code passes a REST connector.
    """

    async def query(self, query_string: str) -> Mapping[str, Any] | None:
        """Execute a fresh query and return the first raw response."""
        ...

    async def query_more(self, continuation_token: str) -> Mapping[str, Any] | None:
        """Continue a prior query from its continuation token."""
        ...


@dataclass(frozen=True)
class PageHint:
    """Field names used to read a raw page response.

    Attributes:
        records_field: Field holding the list of records
        done_field: Field holding the completion flag
        cursor_field: Field holding the continuation token
    """

    records_field: str = "records"
    done_field: str = "done"
    cursor_field: str = "nextRecordsUrl"


class RetrievalState(str, Enum):
    """States of one retrieval.

    START -> FETCHING -> (CONTINUING <-> FETCHING) -> FINISHED, and any
    state -> FAILED.
    """

    START = "start"
    FETCHING = "fetching"
    CONTINUING = "continuing"
    FINISHED = "finished"
    FAILED = "failed"


@dataclass
class RetrievalResult:
    """Result of a completed retrieval.

    Attributes:
        records: All records in page-arrival order
        pages_fetched: Number of pages retrieved
        calls_made: Successful network calls (one per page)
        elapsed_ms: Wall time of the retrieval in milliseconds
    """

    records: list[Mapping[str, Any]] = field(default_factory=list)
    pages_fetched: int = 0
    calls_made: int = 0
    elapsed_ms: float = 0.0

    @property
    def total_records(self) -> int:
        return len(self.records)
