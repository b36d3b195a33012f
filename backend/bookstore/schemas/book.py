"""
Bookstore API - Book Transfer Objects
======================================

What:  Request and response bodies for /api/books.

    BookResponse  - what GET and POST return
    BookCreate    - POST body; must not carry an id
    BookUpdate    - PUT body; carries the id, which must match the path

Wire format is camelCase:
    {"id": 1, "title": "Dune", "year": 1965, "authorId": 1}
"""

from typing import Optional

from pydantic import ConfigDict, Field

from bookstore.schemas.common import CamelModel


class BookResponse(CamelModel):
    id: int = Field(description="Book identifier")
    title: str = Field(description="Book title")
    year: Optional[int] = Field(default=None, description="Publication year")
    author_id: int = Field(description="Identifier of the book's author")


class BookFields(CamelModel):
    """Mutable fields shared by the create and update bodies."""
    title: str = Field(min_length=1, max_length=200, description="Book title")
    year: Optional[int] = Field(default=None, ge=0, le=9999, description="Publication year")
    author_id: int = Field(ge=1, description="Identifier of the book's author")


class BookCreate(BookFields):
    # Unknown keys (including "id") are rejected
    model_config = ConfigDict(extra="forbid")


class BookUpdate(BookFields):
    id: int = Field(ge=1, description="Identifier of the book being replaced")
