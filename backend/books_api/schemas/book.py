"""
Books API: Pydantic Response Schemas
======================================

What:  Models describing the JSON the API returns.
Why:   FastAPI uses them for response serialization and the OpenAPI docs.

Request bodies are NOT modelled: POST and PUT accept any JSON object and the
store persists it unchanged. Book is documentation of the usual shape only,
so it allows extra keys and every content field is optional.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    A Book record as returned by GET /books, GET /books/{id} and POST /books.

    Example:
        {
            "id": "3Xb9pQ0mZr1",
            "name": "The Art of Programming",
            "author": "John Doe",
            "description": "Programming"
        }
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "3Xb9pQ0mZr1",
                "name": "The Art of Programming",
                "author": "John Doe",
                "description": "Programming",
            }
        },
    )

    id: str = Field(description="Store-assigned document identifier")
    name: Optional[str] = Field(default=None, description="Title")
    author: Optional[str] = Field(default=None, description="Author name")
    description: Optional[str] = Field(default=None, description="Free-text description")


class MessageResponse(BaseModel):
    """Confirmation or error envelope: `{"message": "..."}`."""

    message: str = Field(description="Human-readable outcome")
