"""BookCacheService — cache-aside reads and invalidating writes for books.

A book is embedded in its author's author.books.{id} snapshot, so every book
write also deletes that key in the author namespace. When an update moves a
book to another author, both the old and the new owner's keys are deleted.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_author.domain.cache import author_books_key
from src.catalog_book.domain.cache import (
    BOOK_LIST_SHAPE,
    BOOK_SHAPE,
    BOOKS_ALL_KEY,
    book_key,
)
from src.catalog_book.domain.models import Book, BookDraft
from src.catalog_book.domain.repository import BookRepositoryProtocol
from src.catalog_book.infrastructure.persistence import BookRepository
from src.catalog_common.cache import CacheGatewayProtocol
from src.catalog_common.cache_aside import STORE_ERRORS, CacheAsideService
from src.catalog_common.errors import NotFoundError
from src.catalog_common.outcome import Ok, Outcome


class BookCacheService(CacheAsideService):
    entity = "book"

    def __init__(
        self,
        cache: CacheGatewayProtocol,
        repo: BookRepositoryProtocol | None = None,
        ttl_seconds: int | None = None,
        fail_open: bool | None = None,
    ) -> None:
        super().__init__(cache, ttl_seconds=ttl_seconds, fail_open=fail_open)
        self._repo: BookRepositoryProtocol = repo or BookRepository()

    async def get_all(self, db: AsyncSession) -> Outcome[list[Book]]:
        return await self._read_through(
            BOOKS_ALL_KEY, BOOK_LIST_SHAPE, lambda: self._repo.list_books(db)
        )

    async def get(self, db: AsyncSession, book_id: int) -> Outcome[Book]:
        return await self._read_through(
            book_key(book_id),
            BOOK_SHAPE,
            lambda: self._repo.get_book_by_id(db, book_id),
            book_id,
        )

    async def create(self, db: AsyncSession, draft: BookDraft) -> Outcome[Book]:
        try:
            book = await self._repo.insert_book(db, draft)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "create", None, exc)

        failure = await self._invalidate(
            "create", book.id, BOOKS_ALL_KEY, author_books_key(book.author_id)
        )
        if failure is not None:
            return failure
        return Ok(book)

    async def update(
        self, db: AsyncSession, book_id: int, draft: BookDraft
    ) -> Outcome[Book]:
        try:
            existing = await self._repo.get_book_by_id(db, book_id)
            book = None
            if existing is not None:
                book = await self._repo.update_book(db, book_id, draft)
            if existing is None or book is None:
                await db.rollback()
                return NotFoundError(self.entity, book_id)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "update", book_id, exc)

        keys = [BOOKS_ALL_KEY, book_key(book_id), author_books_key(book.author_id)]
        if existing.author_id != book.author_id:
            keys.append(author_books_key(existing.author_id))
        failure = await self._invalidate("update", book_id, *keys)
        if failure is not None:
            return failure
        return Ok(book)

    async def delete(self, db: AsyncSession, book_id: int) -> Outcome[bool]:
        try:
            existing = await self._repo.get_book_by_id(db, book_id)
            if existing is None or not await self._repo.delete_book(db, book_id):
                await db.rollback()
                return NotFoundError(self.entity, book_id)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "delete", book_id, exc)

        failure = await self._invalidate(
            "delete",
            book_id,
            BOOKS_ALL_KEY,
            book_key(book_id),
            author_books_key(existing.author_id),
        )
        if failure is not None:
            return failure
        return Ok(True)
