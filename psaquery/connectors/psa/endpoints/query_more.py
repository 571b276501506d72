"""PSA query continuation endpoint definition.

The service hands out the continuation token as an instance-relative URL
(``nextRecordsUrl``), so the token itself is the request path.
"""

from __future__ import annotations

from typing import Any

from psaquery.runtime.rest import RestEndpointSpec

from .query import Adapter  # noqa: F401
from .query import build_headers


def build_path(params: dict[str, Any]) -> str:
    """Use the continuation token verbatim as the request path."""
    return params["cursor"]


# Endpoint specification
SPEC = RestEndpointSpec(
    id="query_more",
    build_path=build_path,
    build_headers=build_headers,
)
