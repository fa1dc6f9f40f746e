"""BookRepository — concrete implementation of BookRepositoryProtocol.

All queries use raw text() SQL (no ORM). Writes run inside the caller's
transaction; the service commits or rolls back.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_book.domain.models import Book, BookDraft

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_SELECT_COLUMNS = """
    id, title, description, publish_date, author_id, created_at, updated_at
"""

_LIST_BOOKS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM books
    ORDER BY id
""")

_GET_BOOK_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM books
    WHERE id = :book_id
""")

_INSERT_BOOK_SQL = text(f"""
    INSERT INTO books (title, description, publish_date, author_id)
    VALUES (:title, :description, :publish_date, :author_id)
    RETURNING {_SELECT_COLUMNS}
""")

_UPDATE_BOOK_SQL = text(f"""
    UPDATE books
    SET title = :title, description = :description,
        publish_date = :publish_date, author_id = :author_id
    WHERE id = :book_id
    RETURNING {_SELECT_COLUMNS}
""")

_DELETE_BOOK_SQL = text("""
    DELETE FROM books
    WHERE id = :book_id
    RETURNING id
""")

# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_book(row: Any) -> Book:
    return Book(
        id=row.id,
        title=row.title,
        description=row.description,
        publish_date=row.publish_date,
        author_id=row.author_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _draft_params(draft: BookDraft) -> dict[str, Any]:
    return {
        "title": draft.title,
        "description": draft.description,
        "publish_date": draft.publish_date,
        "author_id": draft.author_id,
    }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class BookRepository:
    async def list_books(self, db: AsyncSession) -> list[Book]:
        result = await db.execute(_LIST_BOOKS_SQL)
        return [_row_to_book(row) for row in result.fetchall()]

    async def get_book_by_id(self, db: AsyncSession, book_id: int) -> Book | None:
        result = await db.execute(_GET_BOOK_SQL, {"book_id": book_id})
        row = result.fetchone()
        return _row_to_book(row) if row else None

    async def insert_book(self, db: AsyncSession, draft: BookDraft) -> Book:
        result = await db.execute(_INSERT_BOOK_SQL, _draft_params(draft))
        return _row_to_book(result.fetchone())

    async def update_book(
        self, db: AsyncSession, book_id: int, draft: BookDraft
    ) -> Book | None:
        result = await db.execute(
            _UPDATE_BOOK_SQL, {"book_id": book_id, **_draft_params(draft)}
        )
        row = result.fetchone()
        return _row_to_book(row) if row else None

    async def delete_book(self, db: AsyncSession, book_id: int) -> bool:
        result = await db.execute(_DELETE_BOOK_SQL, {"book_id": book_id})
        return result.fetchone() is not None
