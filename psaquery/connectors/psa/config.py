"""Shared PSA connector constants.

This module centralizes REST paths and request defaults used by the
query endpoints so the connector can stay small and focused.
"""

from __future__ import annotations

API_VERSION = "59.0"

# Records per page requested from the service (the service may return fewer)
DEFAULT_BATCH_SIZE = 2000

# Seconds before a single HTTP request is abandoned
DEFAULT_TIMEOUT = 30.0


def get_query_path(api_version: str = API_VERSION) -> str:
    """Get the query resource path for an API version.

    Examples:
        >>> get_query_path("59.0")
        '/services/data/v59.0/query'
    """
    return f"/services/data/v{api_version}/query"


def query_options_header(batch_size: int) -> dict[str, str]:
    """Build the header that sets the page size of query results."""
    return {"Sforce-Query-Options": f"batchSize={batch_size}"}
