"""
Books API: Firestore Document Store
=====================================

What:  DocumentStore implementation backed by Google Cloud Firestore.
How:   Uses the Firebase Admin SDK to initialize an app from a service-account
       credential file, then talks to Firestore through its async client
       (firebase_admin.firestore_async -> google.cloud.firestore.AsyncClient).
Who:   Built once by database.init_store() during application startup.

Call mapping:
    get(c, id)           → collection(c).document(id).get()
    query(c, field, n)   → collection(c).order_by(field).limit(n).get()
    add(c, data)         → collection(c).add(data)
    update(c, id, data)  → collection(c).document(id).update(data)
    delete(c, id)        → collection(c).document(id).delete()

No retries or timeouts are added here; the Firestore client's own policies apply.
"""

import logging
from typing import Any, Dict, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async

from books_api.services.store_base import DocumentStore, StoredDocument

logger = logging.getLogger(__name__)


class FirestoreStore(DocumentStore):
    """
    Firestore adapter holding one long-lived AsyncClient.

    The client is safe to share across concurrent requests; the adapter itself
    keeps no other state.
    """

    def __init__(self, client: Any):
        self._client = client

    @classmethod
    def from_service_account(
        cls,
        credentials_path: str,
        database_url: Optional[str] = None,
    ) -> "FirestoreStore":
        """
        Initialize the default Firebase app from a key file and wrap its client.

        If the default app already exists (e.g. a second create_app() in the same
        process), it is reused: firebase_admin refuses to initialize it twice.

        Raises:
            FileNotFoundError / ValueError: the key file is missing or invalid.
        """
        try:
            app = firebase_admin.get_app()
            logger.info("Reusing initialized Firebase app '%s'", app.name)
        except ValueError:
            options = {"databaseURL": database_url} if database_url else None
            cert = credentials.Certificate(credentials_path)
            app = firebase_admin.initialize_app(cert, options)
            logger.info("Firebase app initialized for project %s", cert.project_id)

        return cls(firestore_async.client(app))

    async def get(self, collection: str, document_id: str) -> Optional[StoredDocument]:
        snapshot = await self._client.collection(collection).document(document_id).get()
        if not snapshot.exists:
            return None
        return StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})

    async def query(
        self, collection: str, order_field: str, limit: int
    ) -> List[StoredDocument]:
        query = self._client.collection(collection).order_by(order_field).limit(limit)
        snapshots = await query.get()
        return [
            StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})
            for snapshot in snapshots
        ]

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        # AsyncCollectionReference.add returns (update_time, document_reference)
        _, reference = await self._client.collection(collection).add(data)
        return reference.id

    async def update(
        self, collection: str, document_id: str, data: Dict[str, Any]
    ) -> None:
        await self._client.collection(collection).document(document_id).update(data)

    async def delete(self, collection: str, document_id: str) -> None:
        await self._client.collection(collection).document(document_id).delete()
