"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def psa_credentials() -> tuple[str, str]:
    """Instance URL and access token of a live PSA org."""
    instance_url = os.environ.get("PSA_INSTANCE_URL")
    access_token = os.environ.get("PSA_ACCESS_TOKEN")
    if not instance_url or not access_token:
        pytest.skip("Set PSA_INSTANCE_URL and PSA_ACCESS_TOKEN to run against a live org")
    return instance_url, access_token
