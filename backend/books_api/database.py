"""
Books API: Database Client Lifecycle
======================================

What:  Owns the single long-lived DocumentStore and exposes it to routes.
How:   init_store() builds a FirestoreStore from the configured credential file;
       get_store() is the FastAPI dependency that hands it to each request.
Who:   init_store() is called by the lifespan handler in main.py;
       get_store() is injected into route handlers via Depends().
When:  The store is created once at startup and lives for the process lifetime.
       There is no teardown step.

Testing:
    Tests replace get_store through `app.dependency_overrides[get_store]`,
    so no Firebase credentials are needed to exercise the routes.
"""

import logging
from typing import Optional

from books_api.config import settings
from books_api.exceptions import StoreUnavailableError
from books_api.services.firestore_store import FirestoreStore
from books_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

_store: Optional[DocumentStore] = None


def init_store() -> DocumentStore:
    """
    Create the process-wide store on first call; later calls return it unchanged.

    Raises:
        FileNotFoundError / ValueError: credential file missing or malformed.
    """
    global _store
    if _store is None:
        _store = FirestoreStore.from_service_account(
            settings.firebase_credentials,
            database_url=settings.firebase_database_url or None,
        )
        logger.info("Document store ready (collection '%s')", settings.books_collection)
    return _store


def get_store() -> DocumentStore:
    """
    FastAPI dependency returning the initialized store.

    Raises:
        StoreUnavailableError: startup could not build the store (→ 500).
    """
    if _store is None:
        raise StoreUnavailableError(context={"reason": "store not initialized"})
    return _store
