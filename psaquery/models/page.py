"""Page of query results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Page:
    """Parsed result of one query or continuation call.

    Attributes:
        records: Records of this page, in the order the service sent them
        done: True if no further pages exist
        cursor: Continuation token for the next page (None when done)
        index: Zero-based position of this page within its retrieval
    """

    records: tuple[Mapping[str, Any], ...] = ()
    done: bool = True
    cursor: str | None = None
    index: int = 0

    @property
    def record_count(self) -> int:
        return len(self.records)
