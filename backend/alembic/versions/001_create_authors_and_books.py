"""Create authors and books tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema: `authors` and `books`, plus the index used to look
       up an author's books.
Note:  books.author_id has no foreign key; deleting an author leaves its
       books in place.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Database-assigned identifier",
        ),
        sa.Column(
            "first_name",
            sa.String(100),
            nullable=False,
            comment="Author's given name",
        ),
        sa.Column(
            "last_name",
            sa.String(100),
            nullable=False,
            comment="Author's family name",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "books",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Database-assigned identifier",
        ),
        sa.Column(
            "title",
            sa.String(200),
            nullable=False,
            comment="Book title",
        ),
        sa.Column(
            "year",
            sa.Integer(),
            nullable=True,
            comment="Publication year",
        ),
        sa.Column(
            "author_id",
            sa.Integer(),
            nullable=False,
            comment="Identifier of the book's author",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_books_author_id", "books", ["author_id"])


def downgrade() -> None:
    op.drop_index("idx_books_author_id", table_name="books")
    op.drop_table("books")
    op.drop_table("authors")
