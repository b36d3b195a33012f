"""
Bookstore API - Object Mapper
==============================

What:  Converts between ORM models and transfer objects.
How:   A registry keyed by (source type, target type). Pairs registered
       without an explicit converter get a default one:

           ORM model  → pydantic schema:  Schema.model_validate(obj, from_attributes=True)
           pydantic schema → ORM model:   Model(**schema.model_dump())

       Looking up an unregistered pair raises MappingError instead of
       guessing, so a missing profile shows up as a logged 500 rather than
       a silently wrong response.

Usage:
    response = mapper.map(book, BookResponse)
    books = mapper.map_all(rows, BookResponse)
    entity = mapper.map(payload, Book)
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from bookstore.exceptions import MappingError
from bookstore.models import Author, Book
from bookstore.schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookCreate,
    BookResponse,
    BookUpdate,
)

T = TypeVar("T")

Converter = Callable[[Any], Any]


def _default_converter(source: type, target: type) -> Converter:
    if isinstance(target, type) and issubclass(target, BaseModel):
        return lambda obj: target.model_validate(obj, from_attributes=True)
    if isinstance(source, type) and issubclass(source, BaseModel):
        return lambda obj: target(**obj.model_dump())
    raise TypeError(
        f"No default converter from {source.__name__} to {target.__name__}; pass one explicitly"
    )


class Mapper:
    """Registry-based converter between persisted and transfer shapes."""

    def __init__(self) -> None:
        self._converters: Dict[Tuple[type, type], Converter] = {}

    def register(
        self,
        source: type,
        target: type,
        converter: Optional[Converter] = None,
    ) -> "Mapper":
        self._converters[(source, target)] = converter or _default_converter(source, target)
        return self

    def map(self, obj: Any, target: Type[T]) -> T:
        try:
            converter = self._converters[(type(obj), target)]
        except KeyError:
            raise MappingError(type(obj), target) from None
        return converter(obj)

    def map_all(self, items: Iterable[Any], target: Type[T]) -> List[T]:
        return [self.map(item, target) for item in items]


def build_mapper() -> Mapper:
    """Mapper with the Book and Author profiles registered."""
    return (
        Mapper()
        .register(Book, BookResponse)
        .register(BookCreate, Book)
        .register(BookUpdate, Book)
        .register(Author, AuthorResponse)
        .register(AuthorCreate, Author)
        .register(AuthorUpdate, Author)
    )


# Stateless after construction; shared by every request
mapper = build_mapper()
