"""
Bookstore API - Repository Tests
=================================

What:  SQLAlchemyRepository behaviour against a real (in-memory SQLite)
       database through BookRepository and AuthorRepository.
"""

import pytest

from bookstore.models import Author, Book
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.repositories.base import MAX_ID


async def seed_books(session, *titles):
    repository = BookRepository(session)
    books = []
    for index, title in enumerate(titles, start=1):
        book = Book(title=title, year=1960 + index, author_id=1)
        assert await repository.create(book)
        books.append(book)
    await session.commit()
    return books


class TestReads:

    @pytest.mark.asyncio
    async def test_find_all_empty(self, db_session):
        assert await BookRepository(db_session).find_all() == []

    @pytest.mark.asyncio
    async def test_find_all_ordered_by_id(self, db_session):
        await seed_books(db_session, "Dune", "Hyperion", "Solaris")

        books = await BookRepository(db_session).find_all()

        assert [b.title for b in books] == ["Dune", "Hyperion", "Solaris"]
        assert [b.id for b in books] == sorted(b.id for b in books)

    @pytest.mark.asyncio
    async def test_find_by_id(self, db_session):
        dune, = await seed_books(db_session, "Dune")

        found = await BookRepository(db_session).find_by_id(dune.id)

        assert found is not None
        assert found.title == "Dune"

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, db_session):
        assert await BookRepository(db_session).find_by_id(999) is None

    @pytest.mark.asyncio
    async def test_exists(self, db_session):
        dune, = await seed_books(db_session, "Dune")
        repository = BookRepository(db_session)

        assert await repository.exists(dune.id) is True
        assert await repository.exists(dune.id + 100) is False


class TestWrites:

    @pytest.mark.asyncio
    async def test_create_assigns_positive_unique_ids(self, db_session):
        repository = AuthorRepository(db_session)
        first = Author(first_name="Frank", last_name="Herbert")
        second = Author(first_name="Ursula", last_name="Le Guin")

        assert await repository.create(first)
        assert await repository.create(second)

        assert first.id >= 1
        assert second.id >= 1
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_update_replaces_mutable_fields(self, db_session, db_session_factory):
        dune, = await seed_books(db_session, "Dune")

        changed = await BookRepository(db_session).update(
            Book(id=dune.id, title="Dune Messiah", year=None, author_id=2)
        )
        await db_session.commit()

        assert changed is True
        async with db_session_factory() as fresh:
            stored = await BookRepository(fresh).find_by_id(dune.id)
            assert (stored.title, stored.year, stored.author_id) == ("Dune Messiah", None, 2)

    @pytest.mark.asyncio
    async def test_update_missing_row_reports_failure(self, db_session):
        changed = await BookRepository(db_session).update(
            Book(id=12345, title="Nowhere", year=2000, author_id=1)
        )

        assert changed is False

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        dune, hyperion = await seed_books(db_session, "Dune", "Hyperion")
        dune_id, hyperion_id = dune.id, hyperion.id
        repository = BookRepository(db_session)

        assert await repository.delete(dune) is True
        await db_session.commit()

        assert await repository.exists(dune_id) is False
        assert await repository.exists(hyperion_id) is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("book_id", [0, MAX_ID + 1, 2**63])
    async def test_ids_outside_key_range_are_absent(self, db_session, book_id):
        repository = BookRepository(db_session)
        ghost = Book(id=book_id, title="Ghost", author_id=1)

        assert await repository.find_by_id(book_id) is None
        assert await repository.exists(book_id) is False
        assert await repository.update(ghost) is False
        assert await repository.delete(ghost) is False

    @pytest.mark.asyncio
    async def test_delete_missing_row_reports_failure(self, db_session):
        assert await BookRepository(db_session).delete(Book(id=777, title="Ghost", author_id=1)) is False
