"""PSA query endpoint definition and adapter.

Runs a SOQL query and returns the first page of its results.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from psaquery.connectors.psa.config import (
    API_VERSION,
    DEFAULT_BATCH_SIZE,
    get_query_path,
    query_options_header,
)
from psaquery.core import PermanentCallFailure
from psaquery.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the query path for the configured API version."""
    return get_query_path(params.get("api_version", API_VERSION))


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the query endpoint."""
    return {"q": params["soql"]}


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    """Request the configured page size for this call."""
    return query_options_header(params.get("batch_size", DEFAULT_BATCH_SIZE))


# Endpoint specification
SPEC = RestEndpointSpec(
    id="query",
    build_path=build_path,
    build_query=build_query,
    build_headers=build_headers,
)


class Adapter(ResponseAdapter):
    """Adapter checking that a query response is a JSON object."""

    def parse(self, response: Any, params: dict[str, Any]) -> Mapping[str, Any] | None:
        """Return the raw page response unchanged.

        Args:
            response: Decoded JSON body (object with records/done/nextRecordsUrl)
            params: Request parameters

        Returns:
            The response mapping, or None for an empty body

        Raises:
            PermanentCallFailure: If the body is not a JSON object
        """
        if response is None or isinstance(response, Mapping):
            return response
        raise PermanentCallFailure(
            f"Unexpected {params.get('endpoint', 'query')} response type: {type(response).__name__}"
        )
