"""Repository for Author records."""

from bookstore.models.author import Author
from bookstore.repositories.base import SQLAlchemyRepository


class AuthorRepository(SQLAlchemyRepository[Author]):
    model = Author
