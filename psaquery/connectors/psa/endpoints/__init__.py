"""PSA REST endpoint registry."""

from __future__ import annotations

from psaquery.runtime.rest import ResponseAdapter, RestEndpointSpec

from .query import SPEC as QuerySpec  # noqa: N811
from .query import Adapter as QueryAdapter
from .query_more import SPEC as QueryMoreSpec  # noqa: N811
from .query_more import Adapter as QueryMoreAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "query": (QuerySpec, QueryAdapter),
    "query_more": (QueryMoreSpec, QueryMoreAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier ("query" or "query_more")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None
