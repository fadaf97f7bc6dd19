"""
Books API: Abstract Document Store Interface
===============================================

What:  The contract the CRUD layer expects from the hosted document database.
How:   Concrete implementations inherit from DocumentStore and implement the five
       operations. FirestoreStore is the production implementation; tests plug in
       an in-memory store through FastAPI's dependency overrides.
Who:   Called by BookService; provided to routes by database.get_store().

Every operation is a coroutine: it suspends the request handler (not the
process) while the network call is in flight.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class StoredDocument:
    """A document as read from the store: its identifier plus its body."""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> Dict[str, Any]:
        """
        Flatten into the API representation.

        The store identifier wins over any `id` key persisted inside the body,
        so GET /books/{id} always echoes the id it was asked for.
        """
        return {**self.data, "id": self.id}


class DocumentStore(ABC):
    """
    Abstract interface over a collection-oriented document database.

    Contract:
        - get() returns None for a missing document (never raises for "absent")
        - query() returns documents ordered ascending by `order_field`
        - add() lets the store assign the identifier and returns it
        - update() overwrites only the given top-level fields
        - Any other failure raises the implementation's own exception; the
          caller decides whether to translate it
    """

    @abstractmethod
    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        """Fetch one document by id, or None when it does not exist."""
        ...

    @abstractmethod
    async def query(
        self, collection: str, order_field: str, limit: int
    ) -> List[StoredDocument]:
        """Fetch up to `limit` documents ordered ascending by `order_field`."""
        ...

    @abstractmethod
    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        """Insert a new document and return its store-assigned id."""
        ...

    @abstractmethod
    async def update(
        self, collection: str, document_id: str, data: Dict[str, Any]
    ) -> None:
        """Partially overwrite an existing document."""
        ...

    @abstractmethod
    async def delete(self, collection: str, document_id: str) -> None:
        """Remove a document."""
        ...
