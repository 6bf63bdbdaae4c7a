"""Pytest configuration and fixtures."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["SEARCH_ENGINE_ENV"] = "test"


@pytest.fixture
def fake_index():
    """In-memory index wired into the indexer and the query service."""
    from unittest.mock import patch

    from tests.fakes.fake_search_index import FakeSearchIndex

    index = FakeSearchIndex()
    with patch("app.core.search_indexer.upsert_entry", side_effect=index.upsert_entry), \
         patch("app.core.search_indexer.delete_entry", side_effect=index.delete_entry), \
         patch("app.core.search_service.query_ranked", side_effect=index.query_ranked):
        yield index
