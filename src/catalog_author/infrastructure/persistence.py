"""AuthorRepository — concrete implementation of AuthorRepositoryProtocol.

All queries use raw text() SQL (no ORM). Writes run inside the caller's
transaction; the service commits or rolls back.
Deleting an author cascades to its books (FK ON DELETE CASCADE).
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_author.domain.models import Author, AuthorDraft, AuthorWithBooks
from src.catalog_book.domain.models import Book

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_SELECT_COLUMNS = """
    id, name, bio, birth_date, created_at, updated_at
"""

_LIST_AUTHORS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM authors
    ORDER BY id
""")

_GET_AUTHOR_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM authors
    WHERE id = :author_id
""")

# One row per book; a single row with NULL book columns when the author has none.
_GET_AUTHOR_WITH_BOOKS_SQL = text("""
    SELECT a.id, a.name, a.bio, a.birth_date, a.created_at, a.updated_at,
           b.id AS book_id, b.title AS book_title,
           b.description AS book_description,
           b.publish_date AS book_publish_date,
           b.created_at AS book_created_at, b.updated_at AS book_updated_at
    FROM authors a
    LEFT JOIN books b ON b.author_id = a.id
    WHERE a.id = :author_id
    ORDER BY b.id
""")

_INSERT_AUTHOR_SQL = text(f"""
    INSERT INTO authors (name, bio, birth_date)
    VALUES (:name, :bio, :birth_date)
    RETURNING {_SELECT_COLUMNS}
""")

_UPDATE_AUTHOR_SQL = text(f"""
    UPDATE authors
    SET name = :name, bio = :bio, birth_date = :birth_date
    WHERE id = :author_id
    RETURNING {_SELECT_COLUMNS}
""")

_DELETE_AUTHOR_SQL = text("""
    DELETE FROM authors
    WHERE id = :author_id
    RETURNING id
""")

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_author(row: Any) -> Author:
    return Author(
        id=row.id,
        name=row.name,
        bio=row.bio,
        birth_date=row.birth_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _rows_to_author_with_books(rows: list[Any]) -> AuthorWithBooks:
    head = rows[0]
    books = [
        Book(
            id=row.book_id,
            title=row.book_title,
            description=row.book_description,
            publish_date=row.book_publish_date,
            author_id=head.id,
            created_at=row.book_created_at,
            updated_at=row.book_updated_at,
        )
        for row in rows
        if row.book_id is not None
    ]
    return AuthorWithBooks(
        id=head.id,
        name=head.name,
        bio=head.bio,
        birth_date=head.birth_date,
        created_at=head.created_at,
        updated_at=head.updated_at,
        books=books,
    )


def _draft_params(draft: AuthorDraft) -> dict[str, Any]:
    return {"name": draft.name, "bio": draft.bio, "birth_date": draft.birth_date}


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class AuthorRepository:
    async def list_authors(self, db: AsyncSession) -> list[Author]:
        result = await db.execute(_LIST_AUTHORS_SQL)
        return [_row_to_author(row) for row in result.fetchall()]

    async def get_author_by_id(
        self, db: AsyncSession, author_id: int
    ) -> Author | None:
        result = await db.execute(_GET_AUTHOR_SQL, {"author_id": author_id})
        row = result.fetchone()
        return _row_to_author(row) if row else None

    async def get_author_with_books(
        self, db: AsyncSession, author_id: int
    ) -> AuthorWithBooks | None:
        result = await db.execute(_GET_AUTHOR_WITH_BOOKS_SQL, {"author_id": author_id})
        rows = result.fetchall()
        return _rows_to_author_with_books(rows) if rows else None

    async def insert_author(self, db: AsyncSession, draft: AuthorDraft) -> Author:
        result = await db.execute(_INSERT_AUTHOR_SQL, _draft_params(draft))
        return _row_to_author(result.fetchone())

    async def update_author(
        self, db: AsyncSession, author_id: int, draft: AuthorDraft
    ) -> Author | None:
        result = await db.execute(
            _UPDATE_AUTHOR_SQL, {"author_id": author_id, **_draft_params(draft)}
        )
        row = result.fetchone()
        return _row_to_author(row) if row else None

    async def delete_author(self, db: AsyncSession, author_id: int) -> bool:
        result = await db.execute(_DELETE_AUTHOR_SQL, {"author_id": author_id})
        return result.fetchone() is not None
