"""CRUD handler for Book records."""

from bookstore.models.book import Book
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate
from bookstore.services.crud_service import CrudService


class BookService(CrudService[Book, BookResponse, BookCreate, BookUpdate]):
    entity_name = "Book"
    model = Book
    response_schema = BookResponse
