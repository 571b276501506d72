"""Integration tests for paginated retrieval against a live PSA org."""

import os

import pytest

from psaquery import QueryAPI, SOQLQueryBuilder
from psaquery.connectors.psa import PSARESTConnector
from psaquery.core import RetrievalAborted, RetryConfig

# Skip all integration tests unless RUN_PSA_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PSA_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_PSA_NETWORK_TESTS=1 to run",
)


class TestPSARetrievalIntegration:
    """Test query and query_more against the live REST API."""

    @pytest.mark.asyncio
    async def test_fetch_health(self, psa_credentials):
        instance_url, access_token = psa_credentials
        async with PSARESTConnector(instance_url, access_token) as connector:
            health = await connector.fetch_health()

        assert health["status"] == "ok"

    @pytest.mark.asyncio
    async def test_retrieval_spans_multiple_pages(self, psa_credentials):
        """With the smallest batch size, 450 rows arrive over at least three pages."""
        instance_url, access_token = psa_credentials
        query = SOQLQueryBuilder().select("Id").from_("User").limit(450).build()

        async with PSARESTConnector(instance_url, access_token, batch_size=200) as connector:
            api = QueryAPI(connector, retry_config=RetryConfig(max_attempts=2, delay=1.0))
            records = await api.retrieve(query)

        ids = [record["Id"] for record in records]
        assert len(ids) == len(set(ids))
        assert len(ids) <= 450

    @pytest.mark.asyncio
    async def test_malformed_query_is_not_retried(self, psa_credentials):
        instance_url, access_token = psa_credentials
        query = SOQLQueryBuilder().select("NoSuchField__c").from_("User").build()

        async with QueryAPI(instance_url=instance_url, access_token=access_token) as api:
            with pytest.raises(RetrievalAborted) as exc_info:
                await api.retrieve(query)

        assert exc_info.value.attempts == 1
