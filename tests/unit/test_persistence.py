"""Unit tests for AuthorRepository and BookRepository using MagicMock AsyncSession."""

from datetime import UTC, date, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.catalog_author.domain.models import AuthorDraft
from src.catalog_author.infrastructure.persistence import AuthorRepository
from src.catalog_book.domain.models import BookDraft
from src.catalog_book.infrastructure.persistence import BookRepository


def _make_author_row(**kwargs):
    row = MagicMock()
    row.id = kwargs.get("id", 1)
    row.name = kwargs.get("name", "Jane")
    row.bio = kwargs.get("bio", "Lorem ipsum")
    row.birth_date = kwargs.get("birth_date", date(1990, 1, 1))
    row.created_at = datetime.now(UTC)
    row.updated_at = datetime.now(UTC)
    return row


def _make_joined_row(book_id, **kwargs):
    row = _make_author_row(**kwargs)
    row.book_id = book_id
    row.book_title = f"Book {book_id}"
    row.book_description = "Lorem ipsum"
    row.book_publish_date = date(2000, 1, 1)
    row.book_created_at = None
    row.book_updated_at = None
    return row


def _make_book_row(**kwargs):
    row = MagicMock()
    row.id = kwargs.get("id", 1)
    row.title = kwargs.get("title", "X")
    row.description = kwargs.get("description", "Lorem ipsum")
    row.publish_date = kwargs.get("publish_date", date(2000, 1, 1))
    row.author_id = kwargs.get("author_id", 1)
    row.created_at = datetime.now(UTC)
    row.updated_at = datetime.now(UTC)
    return row


def _result(one=None, many=None):
    result = MagicMock()
    result.fetchone.return_value = one
    result.fetchall.return_value = many or []
    return result


@pytest.fixture
def db():
    return MagicMock()


class TestAuthorRepository:
    @pytest.mark.asyncio
    async def test_list_authors(self, db):
        db.execute = AsyncMock(return_value=_result(many=[_make_author_row(id=1), _make_author_row(id=2)]))

        authors = await AuthorRepository().list_authors(db)

        assert [a.id for a in authors] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))

        assert await AuthorRepository().get_author_by_id(db, 9) is None
        assert db.execute.call_args.args[1] == {"author_id": 9}

    @pytest.mark.asyncio
    async def test_with_books_groups_join_rows(self, db):
        rows = [_make_joined_row(3, id=1), _make_joined_row(5, id=1)]
        db.execute = AsyncMock(return_value=_result(many=rows))

        author = await AuthorRepository().get_author_with_books(db, 1)

        assert author.id == 1
        assert [b.id for b in author.books] == [3, 5]
        assert all(b.author_id == 1 for b in author.books)

    @pytest.mark.asyncio
    async def test_with_books_author_without_books(self, db):
        db.execute = AsyncMock(return_value=_result(many=[_make_joined_row(None, id=2)]))

        author = await AuthorRepository().get_author_with_books(db, 2)

        assert author.id == 2
        assert author.books == []

    @pytest.mark.asyncio
    async def test_with_books_unknown_author(self, db):
        db.execute = AsyncMock(return_value=_result(many=[]))

        assert await AuthorRepository().get_author_with_books(db, 404) is None

    @pytest.mark.asyncio
    async def test_insert_returns_created_row(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_author_row(id=7)))
        draft = AuthorDraft(name="Jane", bio="Lorem ipsum", birth_date=date(1990, 1, 1))

        author = await AuthorRepository().insert_author(db, draft)

        assert author.id == 7
        assert db.execute.call_args.args[1] == {
            "name": "Jane", "bio": "Lorem ipsum", "birth_date": date(1990, 1, 1),
        }

    @pytest.mark.asyncio
    async def test_update_missing_row(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))
        draft = AuthorDraft(name="Jane Doe", bio="b", birth_date=date(1990, 1, 1))

        assert await AuthorRepository().update_author(db, 3, draft) is None
        assert db.execute.call_args.args[1]["author_id"] == 3

    @pytest.mark.asyncio
    async def test_delete_reports_whether_row_existed(self, db):
        db.execute = AsyncMock(return_value=_result(one=MagicMock(id=1)))
        assert await AuthorRepository().delete_author(db, 1) is True

        db.execute = AsyncMock(return_value=_result(one=None))
        assert await AuthorRepository().delete_author(db, 1) is False


class TestBookRepository:
    @pytest.mark.asyncio
    async def test_list_books(self, db):
        db.execute = AsyncMock(return_value=_result(many=[_make_book_row(id=4, author_id=2)]))

        books = await BookRepository().list_books(db)

        assert books[0].id == 4
        assert books[0].author_id == 2

    @pytest.mark.asyncio
    async def test_get_by_id(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_book_row(id=4, title="Dune")))

        book = await BookRepository().get_book_by_id(db, 4)

        assert book.title == "Dune"

    @pytest.mark.asyncio
    async def test_update_passes_new_owner(self, db):
        db.execute = AsyncMock(return_value=_result(one=_make_book_row(id=4, author_id=8)))
        draft = BookDraft(title="X", description="d", publish_date=date(2000, 1, 1), author_id=8)

        book = await BookRepository().update_book(db, 4, draft)

        assert book.author_id == 8
        params = db.execute.call_args.args[1]
        assert params["book_id"] == 4
        assert params["author_id"] == 8

    @pytest.mark.asyncio
    async def test_delete_missing_row(self, db):
        db.execute = AsyncMock(return_value=_result(one=None))

        assert await BookRepository().delete_book(db, 4) is False
