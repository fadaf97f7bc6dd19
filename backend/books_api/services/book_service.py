"""
Books API: Book Service (CRUD Contract)
=========================================

What:  The five Book operations, each a thin call-through to the DocumentStore.
Who:   Called by the route handlers in routes/books.py.

The contract every single-record operation follows:
    1. Take the identifier from the request path
    2. Fetch the record; absent → NotFoundError (404) with no further side effects
    3. Perform the one requested store operation
    4. Return the record or a confirmation message

Failure policy:
    update_book / delete_book wrap any unexpected store failure in StoreError
    (logged with traceback, answered as 500 "Internal Server Error").
    list_books / get_book / create_book let store exceptions propagate to the
    application's catch-all handler.

Concurrency:
    The existence check and the mutation are two separate store calls with no
    transaction around them. Concurrent writes to one id race; last write wins.
"""

import logging
from typing import Any, Dict, List, Optional

from books_api.config import settings
from books_api.exceptions import BooksApiError, NotFoundError, StoreError
from books_api.schemas.book import MessageResponse
from books_api.services.store_base import DocumentStore, StoredDocument

logger = logging.getLogger(__name__)

# The list endpoint is fixed server-side; callers cannot change order or size.
LIST_ORDER_FIELD = "name"
LIST_LIMIT = 20


class BookService:
    """
    Book operations over an injected DocumentStore.

    Stateless apart from the collection name: the store is passed per call so
    routes can supply it through FastAPI dependency injection.
    """

    def __init__(self, collection: Optional[str] = None):
        self.collection = collection or settings.books_collection

    async def list_books(self, store: DocumentStore) -> List[Dict[str, Any]]:
        """Up to LIST_LIMIT records ordered by name, each carrying its id."""
        documents = await store.query(self.collection, LIST_ORDER_FIELD, LIST_LIMIT)
        return [document.to_record() for document in documents]

    async def get_book(self, store: DocumentStore, book_id: str) -> Dict[str, Any]:
        """
        Raises:
            NotFoundError: no record with this id (→ 404)
        """
        document = await self._require(store, book_id)
        return document.to_record()

    async def create_book(
        self, store: DocumentStore, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Persist the body as-is and echo it back with the store-assigned id.

        No field is required or checked. An `id` key inside the body is stored
        like any other field but never shadows the generated identifier.
        """
        book_id = await store.add(self.collection, data)
        logger.info("Book %s created", book_id)
        return {**data, "id": book_id}

    async def update_book(
        self, store: DocumentStore, book_id: str, data: Dict[str, Any]
    ) -> MessageResponse:
        """
        Overwrite the given fields of an existing record.

        Raises:
            NotFoundError: no record with this id (→ 404)
            StoreError: the store call failed (→ 500)
        """
        try:
            await self._require(store, book_id)
            await store.update(self.collection, book_id, data)
        except BooksApiError:
            raise
        except Exception as e:
            logger.error("Error updating book %s: %s", book_id, str(e), exc_info=True)
            raise StoreError(
                context={"operation": "update", "book_id": book_id,
                         "error_type": type(e).__name__},
            ) from e

        logger.info("Book %s updated (%d fields)", book_id, len(data))
        return MessageResponse(message="Book updated successfully")

    async def delete_book(self, store: DocumentStore, book_id: str) -> MessageResponse:
        """
        Remove an existing record.

        Raises:
            NotFoundError: no record with this id (→ 404)
            StoreError: the store call failed (→ 500)
        """
        try:
            await self._require(store, book_id)
            await store.delete(self.collection, book_id)
        except BooksApiError:
            raise
        except Exception as e:
            logger.error("Error deleting book %s: %s", book_id, str(e), exc_info=True)
            raise StoreError(
                context={"operation": "delete", "book_id": book_id,
                         "error_type": type(e).__name__},
            ) from e

        logger.info("Book %s deleted", book_id)
        return MessageResponse(message="Book deleted successfully")

    async def _require(self, store: DocumentStore, book_id: str) -> StoredDocument:
        document = await store.get(self.collection, book_id)
        if document is None:
            raise NotFoundError(resource="Book", resource_id=book_id)
        return document


book_service = BookService()
