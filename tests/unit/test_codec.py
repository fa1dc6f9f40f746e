"""Tests for the versioned cache payload codec."""

import json
from datetime import UTC, date, datetime

import pytest

from src.catalog_author.domain.cache import (
    AUTHOR_LIST_SHAPE,
    AUTHOR_SHAPE,
    AUTHOR_WITH_BOOKS_SHAPE,
)
from src.catalog_author.domain.models import Author, AuthorWithBooks
from src.catalog_book.domain.cache import BOOK_SHAPE
from src.catalog_book.domain.models import Book
from src.catalog_common.codec import CACHE_FORMAT_VERSION, CachePayloadError


def _joined() -> AuthorWithBooks:
    ts = datetime(2024, 6, 21, 4, 8, 27, tzinfo=UTC)
    return AuthorWithBooks(
        id=1,
        name="Jane",
        bio="Lorem ipsum",
        birth_date=date(1990, 1, 1),
        created_at=ts,
        updated_at=ts,
        books=[
            Book(id=1, title="X", description="d", publish_date=date(2000, 1, 1),
                 author_id=1, created_at=ts, updated_at=ts),
            Book(id=2, title="Y", description="e", publish_date=date(2001, 2, 3),
                 author_id=1),
        ],
    )


class TestEncode:
    def test_envelope_declares_version_and_shape(self) -> None:
        payload = json.loads(AUTHOR_SHAPE.encode(Author(1, "Jane", "bio", date(1990, 1, 1))))
        assert payload["v"] == CACHE_FORMAT_VERSION
        assert payload["shape"] == "author"
        assert payload["data"]["birth_date"] == "1990-01-01"

    def test_collection_is_json_array(self) -> None:
        authors = [Author(i, f"A{i}", "bio", date(1990, 1, i)) for i in (1, 2)]
        payload = json.loads(AUTHOR_LIST_SHAPE.encode(authors))
        assert payload["shape"] == "author_list"
        assert [a["id"] for a in payload["data"]] == [1, 2]


class TestDecode:
    def test_join_snapshot_keeps_nested_books(self) -> None:
        original = _joined()
        decoded = AUTHOR_WITH_BOOKS_SHAPE.decode(AUTHOR_WITH_BOOKS_SHAPE.encode(original))
        assert decoded == original
        assert isinstance(decoded.books[0], Book)
        assert decoded.books[1].publish_date == date(2001, 2, 3)

    def test_rejects_other_version(self) -> None:
        raw = json.dumps({"v": CACHE_FORMAT_VERSION + 1, "shape": "book", "data": {}})
        with pytest.raises(CachePayloadError, match="version"):
            BOOK_SHAPE.decode(raw)

    def test_rejects_other_shape(self) -> None:
        raw = AUTHOR_SHAPE.encode(Author(1, "Jane", "bio", date(1990, 1, 1)))
        with pytest.raises(CachePayloadError, match="expected book"):
            BOOK_SHAPE.decode(raw)

    def test_rejects_malformed_json(self) -> None:
        with pytest.raises(CachePayloadError):
            BOOK_SHAPE.decode("O:8:\"stdClass\":0:{}")

    def test_rejects_data_missing_fields(self) -> None:
        raw = json.dumps({"v": CACHE_FORMAT_VERSION, "shape": "book", "data": {"id": 1}})
        with pytest.raises(CachePayloadError):
            BOOK_SHAPE.decode(raw)
