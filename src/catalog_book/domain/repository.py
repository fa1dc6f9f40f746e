"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_book.domain.models import Book, BookDraft


class BookRepositoryProtocol(Protocol):
    async def list_books(self, db: AsyncSession) -> list[Book]: ...

    async def get_book_by_id(self, db: AsyncSession, book_id: int) -> Book | None: ...

    async def insert_book(self, db: AsyncSession, draft: BookDraft) -> Book: ...

    async def update_book(
        self, db: AsyncSession, book_id: int, draft: BookDraft
    ) -> Book | None: ...

    async def delete_book(self, db: AsyncSession, book_id: int) -> bool: ...
