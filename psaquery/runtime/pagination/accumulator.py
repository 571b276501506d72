"""Order-preserving accumulation of page records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class ResultAccumulator:
    """Collects records from successive pages.

    Records are appended to the tail exactly as received: no deduplication,
    no sorting, no transformation.
    """

    def __init__(self) -> None:
        self._records: list[Mapping[str, Any]] = []

    def append(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Append a page's records.

        Args:
            records: Records in received order

        Returns:
            Number of records appended
        """
        before = len(self._records)
        self._records.extend(records)
        return len(self._records) - before

    def collect(self) -> list[Mapping[str, Any]]:
        """Hand the accumulated records over to the caller.

        The accumulator starts empty again afterwards, so the returned list
        is owned by the caller alone.
        """
        records, self._records = self._records, []
        return records

    def __len__(self) -> int:
        return len(self._records)
