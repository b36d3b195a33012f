"""ORM models. Importing this package registers every table with Base.metadata."""

from bookstore.models.author import Author
from bookstore.models.book import Book

__all__ = ["Author", "Book"]
