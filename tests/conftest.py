"""Pytest fixtures for document store tests."""

import pytest

from docstore import DocumentStore
from docstore.backends import MemoryDocumentClient
from docstore.connection import reset_store
from docstore.config import get_settings

TEST_COLLECTION = "__testCollection"


@pytest.fixture
def memory_client():
    """Empty in-memory backend."""
    return MemoryDocumentClient()


@pytest.fixture
def store(memory_client):
    """DocumentStore connected to an empty in-memory backend."""
    return DocumentStore(memory_client)


@pytest.fixture
async def populated(store):
    """Two records in the test collection, keyed by their generated IDs."""
    first = await store.insert(TEST_COLLECTION, {"string": "first", "number": 1})
    second = await store.insert(TEST_COLLECTION, {"string": "second", "number": 2})
    return {first: "first", second: "second"}


@pytest.fixture(autouse=True)
def _reset_globals():
    """Isolate the process-wide store and cached settings between tests."""
    reset_store()
    get_settings.cache_clear()
    yield
    reset_store()
    get_settings.cache_clear()
