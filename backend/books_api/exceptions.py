"""
Books API: Exception Hierarchy
=================================

What:  Application-specific exceptions for the two failure categories.
How:   Each exception carries a client-safe message and an optional context
       dict. Handlers registered in main.py turn them into the JSON envelope
       `{"message": ...}` with the matching HTTP status.
Who:   Raised by BookService and the store dependency; caught by global handlers.

Exception Hierarchy:
    BooksApiError (base)
    ├── NotFoundError            → 404 {"message": "Book not found"}
    └── StoreError               → 500 {"message": "Internal Server Error"}
        └── StoreUnavailableError   (store was never initialized)

There is no validation category: request bodies are persisted
as-is.
"""

from typing import Any, Dict, Optional


class BooksApiError(Exception):
    """
    Base exception for all Books API errors.

    Attributes:
        message:  Client-facing text (returned in the response body)
        context:  Debug details (logged, never returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(BooksApiError):
    """
    Raised when an identifier does not resolve to a record.

    The message is fixed per resource ("Book not found"); the identifier is kept
    in the context so clients cannot probe ids through error text.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Book",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class StoreError(BooksApiError):
    """
    Raised when a document-store call fails unexpectedly.

    What:    Network failure, permission denied, invalid update payload, etc.
    HTTP:    500 Internal Server Error, always with the generic message.
    The underlying exception is chained (`raise ... from e`) and logged.
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreUnavailableError(StoreError):
    """Raised when a request needs the store but startup never initialized it."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(context=context)
