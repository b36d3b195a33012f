"""
Bookstore API - Route Dependencies
===================================

What:  Per-request construction of services and the logging location label.

route_location:
    Derives "<Component>-<operation>" from the matched route, e.g.
    "Books-create_book": the router's first tag plus the route name (the
    endpoint function name unless the decorator overrides it). It is only
    used to correlate log lines.
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_db_session
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.services.author_service import AuthorService
from bookstore.services.book_service import BookService
from bookstore.services.mapper import mapper

book_logger = logging.getLogger("bookstore.books")
author_logger = logging.getLogger("bookstore.authors")


def route_location(request: Request) -> str:
    route = request.scope.get("route")
    if route is None:
        return request.url.path

    tags = getattr(route, "tags", None) or []
    component = str(tags[0]) if tags else "Api"
    operation = getattr(route, "name", None) or request.method.lower()
    return f"{component}-{operation}"


def get_book_service(db: AsyncSession = Depends(get_db_session)) -> BookService:
    return BookService(BookRepository(db), mapper, book_logger)


def get_author_service(db: AsyncSession = Depends(get_db_session)) -> AuthorService:
    return AuthorService(AuthorRepository(db), mapper, author_logger)
