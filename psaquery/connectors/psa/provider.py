"""PSA REST connector.

This connector exposes the two calls the retrieval engine consumes,
``query`` and ``query_more``, over the service's REST query resource. It
looks up endpoint specs and adapters in the endpoint registry and executes
them with RestRunner.

The connector makes exactly one HTTP request per call. Retrying and
pagination live in the runtime layer, not here.
"""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter
from typing import Any

from psaquery.connectors.psa.config import (
    API_VERSION,
    DEFAULT_BATCH_SIZE,
    DEFAULT_TIMEOUT,
    get_query_path,
)
from psaquery.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class PSARESTConnector:
    """PSA REST connector implementing the QueryService contract."""

    def __init__(
        self,
        instance_url: str,
        access_token: str,
        *,
        api_version: str = API_VERSION,
        batch_size: int = DEFAULT_BATCH_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize PSA REST connector.

        Args:
            instance_url: Base URL of the service instance
            access_token: OAuth bearer token
            api_version: REST API version (e.g. "59.0")
            batch_size: Records per page requested from the service
            timeout: Per-request timeout in seconds
        """
        if not instance_url:
            raise ValueError("instance_url is required")
        if not 200 <= batch_size <= 2000:
            raise ValueError("batch_size must be between 200 and 2000")
        self.instance_url = instance_url.rstrip("/")
        self.api_version = api_version
        self.batch_size = batch_size
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }
        self._transport = RESTTransport(
            base_url=self.instance_url, timeout=timeout, headers=headers
        )
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Execute one PSA REST endpoint.

        Args:
            endpoint_id: Endpoint identifier ("query" or "query_more")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {
            **params,
            "api_version": self.api_version,
            "batch_size": self.batch_size,
            "endpoint": endpoint_id,
        }

        adapter = adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def query(self, query_string: str) -> Mapping[str, Any] | None:
        """Execute a SOQL query and return the first raw page."""
        return await self.fetch("query", {"soql": query_string})

    async def query_more(self, continuation_token: str) -> Mapping[str, Any] | None:
        """Fetch the raw page following ``continuation_token``."""
        return await self.fetch("query_more", {"cursor": continuation_token})

    async def fetch_health(self) -> dict[str, object]:
        """Request the versioned API root to verify connectivity and credentials."""
        path = get_query_path(self.api_version).rsplit("/", 1)[0]
        start = perf_counter()
        await self._transport.get(path)
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "instance_url": self.instance_url,
            "api_version": self.api_version,
            "status": "ok",
            "latency_ms": latency_ms,
            "endpoint": path,
        }

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> PSARESTConnector:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
