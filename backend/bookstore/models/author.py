"""
Bookstore API - Author SQLAlchemy Model
========================================

What:  ORM model for the `authors` table.
Who:   Used by AuthorRepository and by Alembic for schema management.

Lifecycle:
    1. Created via POST /api/authors; the database assigns the integer id
    2. Replaced field-by-field via PUT /api/authors/{id}; id never changes
    3. Hard-deleted via DELETE /api/authors/{id}. Books that reference the
       author are left as they are.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Database-assigned identifier",
    )

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's given name",
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's family name",
    )

    def __repr__(self) -> str:
        return (
            f"<Author(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )
