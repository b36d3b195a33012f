"""
Bookstore API - Book SQLAlchemy Model
======================================

What:  ORM model for the `books` table.
Who:   Used by BookRepository and by Alembic for schema management.

Table Design:
    - id: integer primary key assigned by the database on insert
    - title: required, up to 200 characters
    - year: publication year, optional
    - author_id: the author's id. Plain indexed column without a foreign-key
      constraint: authors can be deleted while books still point at them.

Index on author_id:
    Supports looking up an author's books without a full table scan.
"""

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Database-assigned identifier",
    )

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Book title",
    )

    year: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        default=None,
        comment="Publication year",
    )

    author_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Identifier of the book's author",
    )

    __table_args__ = (
        Index("idx_books_author_id", author_id),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author_id={self.author_id})>"
