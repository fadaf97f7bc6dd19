"""
Books API: Book Route Handlers
================================

What:  The five /books endpoints.
How:   Each handler takes the path id and/or JSON body, delegates to BookService
       with the store from get_store(), and returns the result.

Route Inventory:
    GET    /books        → 200 [Book, ...]      (max 20, ordered by name)
    GET    /books/{id}   → 200 Book             | 404
    POST   /books        → 201 Book with id
    PUT    /books/{id}   → 200 {message}        | 404 | 500
    DELETE /books/{id}   → 200 {message}        | 404 | 500

Errors are raised as exceptions and rendered by the handlers in main.py.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from books_api.database import get_store
from books_api.schemas.book import Book, MessageResponse
from books_api.services.book_service import book_service
from books_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])

_NOT_FOUND = {404: {"description": "Book not found", "model": MessageResponse}}
_SERVER_ERROR = {500: {"description": "Internal Server Error", "model": MessageResponse}}


@router.get(
    "",
    responses={200: {"model": List[Book]}, **_SERVER_ERROR},
    summary="List books",
    description="Returns up to 20 books ordered by name. Order and size are fixed.",
)
async def list_books(
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    return await book_service.list_books(store)


@router.get(
    "/{book_id}",
    responses={200: {"model": Book}, **_NOT_FOUND},
    summary="Get a book by id",
)
async def get_book(
    book_id: str,
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    return await book_service.get_book(store, book_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": Book}, **_SERVER_ERROR},
    summary="Create a book",
    description=(
        "Stores the JSON object as a new book and returns it with the generated id. "
        "Fields are not validated."
    ),
)
async def create_book(
    data: Dict[str, Any] = Body(
        ...,
        examples=[{
            "name": "The Art of Programming",
            "author": "John Doe",
            "description": "Programming",
        }],
    ),
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    return await book_service.create_book(store, data)


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a book",
    description="Overwrites the given fields of an existing book; other fields are kept.",
)
async def update_book(
    book_id: str,
    data: Dict[str, Any] = Body(
        ...,
        examples=[{"name": "Updated Title", "author": "Updated Author"}],
    ),
    store: DocumentStore = Depends(get_store),
) -> MessageResponse:
    return await book_service.update_book(store, book_id, data)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a book",
)
async def delete_book(
    book_id: str,
    store: DocumentStore = Depends(get_store),
) -> MessageResponse:
    return await book_service.delete_book(store, book_id)
