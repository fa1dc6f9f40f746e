"""Tests for catalog request/response schemas."""

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from src.catalog_author.application.schemas import (
    AuthorOut,
    AuthorRequest,
    AuthorWithBooksOut,
)
from src.catalog_author.domain.models import Author, AuthorDraft, AuthorWithBooks
from src.catalog_book.application.schemas import BookOut, BookRequest
from src.catalog_book.domain.models import Book, BookDraft


class TestAuthorRequest:
    def test_valid(self) -> None:
        req = AuthorRequest(name="Jane", bio="Lorem ipsum", birth_date="1990-01-01")
        assert req.to_draft() == AuthorDraft("Jane", "Lorem ipsum", date(1990, 1, 1))

    def test_name_too_long_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuthorRequest(name="x" * 101, bio="b", birth_date="1990-01-01")

    def test_missing_bio_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuthorRequest(name="Jane", birth_date="1990-01-01")

    def test_bad_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuthorRequest(name="Jane", bio="b", birth_date="not-a-date")


class TestBookRequest:
    def test_valid(self) -> None:
        req = BookRequest(title="X", description="d", publish_date="2000-01-01", author_id=1)
        assert req.to_draft() == BookDraft("X", "d", date(2000, 1, 1), 1)

    def test_non_positive_author_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BookRequest(title="X", description="d", publish_date="2000-01-01", author_id=0)

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BookRequest(title="", description="d", publish_date="2000-01-01", author_id=1)


class TestOut:
    def test_author_out_formats_dates(self) -> None:
        ts = datetime(2024, 6, 21, 4, 8, 27, tzinfo=UTC)
        out = AuthorOut.from_domain(
            Author(1, "Jane", "bio", date(1990, 1, 1), created_at=ts, updated_at=ts)
        )
        assert out.birth_date == "1990-01-01"
        assert out.created_at == ts.isoformat()

    def test_author_with_books_out(self) -> None:
        joined = AuthorWithBooks(
            id=1, name="Jane", bio="bio", birth_date=date(1990, 1, 1),
            books=[Book(1, "X", "d", date(2000, 1, 1), 1)],
        )
        out = AuthorWithBooksOut.from_joined(joined)
        assert out.id == 1
        assert out.books == [BookOut.from_domain(joined.books[0])]
        assert out.books[0].created_at is None
