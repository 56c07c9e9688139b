"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def live_parent() -> str:
    """Resource whose tag bindings are listed (RESOURCEMANAGER_TEST_PARENT)."""
    parent = os.environ.get("RESOURCEMANAGER_TEST_PARENT")
    if not parent:
        pytest.skip("Set RESOURCEMANAGER_TEST_PARENT to a full resource name")
    if not os.environ.get("GOOGLE_OAUTH_ACCESS_TOKEN"):
        pytest.skip("Set GOOGLE_OAUTH_ACCESS_TOKEN to a valid bearer token")
    return parent
