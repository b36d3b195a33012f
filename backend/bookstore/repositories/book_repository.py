"""Repository for Book records."""

from bookstore.models.book import Book
from bookstore.repositories.base import SQLAlchemyRepository


class BookRepository(SQLAlchemyRepository[Book]):
    model = Book
