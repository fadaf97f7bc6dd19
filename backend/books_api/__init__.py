"""
Books API: Application Package
=================================

What: REST API exposing CRUD operations over the Firestore "Books" collection.
Who:  Imported by uvicorn (books_api.main:app), pytest and the `books-api` script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        BookService (CRUD contract)  │  ← existence check, then act
    ├─────────────────────────────────────┤
    │       DocumentStore (interface)     │  ← get/query/add/update/delete
    ├─────────────────────────────────────┤
    │    FirestoreStore (Firebase Admin)  │  ← the hosted document database
    └─────────────────────────────────────┘

    The store holds every record; the API keeps no cached or derived state.
"""

__version__ = "1.0.0"
