"""
Books API: Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── memory_store: In-memory DocumentStore (behaves like a tiny Firestore)
    ├── mock_store: AsyncMock with the DocumentStore interface
    ├── sample_book: Request body used by most tests
    └── test_client: HTTPX AsyncClient talking to the app with memory_store injected
"""

import os
import uuid
from collections import defaultdict
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings BEFORE any books_api import reads them
os.environ["FIREBASE_CREDENTIALS"] = "./does-not-exist/serviceAccountKey.json"
os.environ["BOOKS_COLLECTION"] = "Books"
os.environ["LOG_LEVEL"] = "WARNING"

from books_api.services.store_base import DocumentStore, StoredDocument  # noqa: E402


class InMemoryStore(DocumentStore):
    """
    DocumentStore kept in dicts, for route tests without Firestore.

    Like Firestore, query() skips documents that lack the order field and
    update() fails for an id that does not exist.
    """

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)

    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        data = self.collections[collection].get(document_id)
        if data is None:
            return None
        return StoredDocument(id=document_id, data=dict(data))

    async def query(
        self, collection: str, order_field: str, limit: int
    ) -> List[StoredDocument]:
        rows = [
            (doc_id, data)
            for doc_id, data in self.collections[collection].items()
            if order_field in data
        ]
        rows.sort(key=lambda row: row[1][order_field])
        return [StoredDocument(id=doc_id, data=dict(data)) for doc_id, data in rows[:limit]]

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex[:20]
        self.collections[collection][document_id] = dict(data)
        return document_id

    async def update(
        self, collection: str, document_id: str, data: Dict[str, Any]
    ) -> None:
        if document_id not in self.collections[collection]:
            raise KeyError(f"No document to update: {document_id}")
        self.collections[collection][document_id].update(data)

    async def delete(self, collection: str, document_id: str) -> None:
        self.collections[collection].pop(document_id, None)


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def mock_store():
    """
    AsyncMock constrained to the DocumentStore interface.

    Usage:
        mock_store.get.return_value = StoredDocument(id="abc", data={...})
    """
    return AsyncMock(spec=DocumentStore)


@pytest.fixture
def sample_book():
    return {
        "name": "The Art of Programming",
        "author": "John Doe",
        "description": "Programming",
    }


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    HTTPX AsyncClient wired to the FastAPI app through ASGITransport.

    raise_app_exceptions=False lets tests observe the 500 response produced by
    the catch-all handler instead of the re-raised exception.
    """
    from books_api.database import get_store
    from books_api.main import app

    app.dependency_overrides[get_store] = lambda: memory_store
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
