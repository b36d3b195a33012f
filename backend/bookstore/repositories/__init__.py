# Repositories package init
"""
Bookstore API - Repository Layer
=================================

What:  Persistence access, one repository per entity type.

Repository Inventory:
    - SQLAlchemyRepository (generic): find_all, find_by_id, exists,
      create, update, delete
    - BookRepository:   Book records
    - AuthorRepository: Author records
"""

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.base import SQLAlchemyRepository
from bookstore.repositories.book_repository import BookRepository

__all__ = ["AuthorRepository", "BookRepository", "SQLAlchemyRepository"]
