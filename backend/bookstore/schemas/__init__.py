"""Pydantic transfer objects (the API contract)."""

from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate
from bookstore.schemas.common import HealthResponse, ValidationErrorResponse

__all__ = [
    "AuthorCreate",
    "AuthorResponse",
    "AuthorUpdate",
    "BookCreate",
    "BookResponse",
    "BookUpdate",
    "HealthResponse",
    "ValidationErrorResponse",
]
