"""CRUD handler for Author records."""

from bookstore.models.author import Author
from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.services.crud_service import CrudService


class AuthorService(CrudService[Author, AuthorResponse, AuthorCreate, AuthorUpdate]):
    entity_name = "Author"
    model = Author
    response_schema = AuthorResponse
