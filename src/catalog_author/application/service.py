"""AuthorCacheService — cache-aside reads and invalidating writes for authors.

Every method returns an Outcome instead of raising. Writes commit before
invalidating, and invalidate before returning.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_author.domain.cache import (
    AUTHOR_LIST_SHAPE,
    AUTHOR_SHAPE,
    AUTHOR_WITH_BOOKS_SHAPE,
    AUTHORS_ALL_KEY,
    author_books_key,
    author_key,
)
from src.catalog_author.domain.models import Author, AuthorDraft, AuthorWithBooks
from src.catalog_author.domain.repository import AuthorRepositoryProtocol
from src.catalog_author.infrastructure.persistence import AuthorRepository
from src.catalog_book.domain.cache import BOOKS_ALL_KEY, book_key
from src.catalog_common.cache import CacheGatewayProtocol
from src.catalog_common.cache_aside import STORE_ERRORS, CacheAsideService
from src.catalog_common.errors import NotFoundError
from src.catalog_common.outcome import Ok, Outcome


class AuthorCacheService(CacheAsideService):
    entity = "author"

    def __init__(
        self,
        cache: CacheGatewayProtocol,
        repo: AuthorRepositoryProtocol | None = None,
        ttl_seconds: int | None = None,
        fail_open: bool | None = None,
    ) -> None:
        super().__init__(cache, ttl_seconds=ttl_seconds, fail_open=fail_open)
        self._repo: AuthorRepositoryProtocol = repo or AuthorRepository()

    async def get_all(self, db: AsyncSession) -> Outcome[list[Author]]:
        return await self._read_through(
            AUTHORS_ALL_KEY, AUTHOR_LIST_SHAPE, lambda: self._repo.list_authors(db)
        )

    async def get(self, db: AsyncSession, author_id: int) -> Outcome[Author]:
        return await self._read_through(
            author_key(author_id),
            AUTHOR_SHAPE,
            lambda: self._repo.get_author_by_id(db, author_id),
            author_id,
        )

    async def get_related(
        self, db: AsyncSession, author_id: int
    ) -> Outcome[AuthorWithBooks]:
        """Author with its books, cached as one join snapshot."""
        return await self._read_through(
            author_books_key(author_id),
            AUTHOR_WITH_BOOKS_SHAPE,
            lambda: self._repo.get_author_with_books(db, author_id),
            author_id,
        )

    async def create(self, db: AsyncSession, draft: AuthorDraft) -> Outcome[Author]:
        try:
            author = await self._repo.insert_author(db, draft)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "create", None, exc)

        failure = await self._invalidate("create", author.id, AUTHORS_ALL_KEY)
        if failure is not None:
            return failure
        return Ok(author)

    async def update(
        self, db: AsyncSession, author_id: int, draft: AuthorDraft
    ) -> Outcome[Author]:
        try:
            author = await self._repo.update_author(db, author_id, draft)
            if author is None:
                await db.rollback()
                return NotFoundError(self.entity, author_id)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "update", author_id, exc)

        failure = await self._invalidate(
            "update",
            author_id,
            AUTHORS_ALL_KEY,
            author_key(author_id),
            author_books_key(author_id),
        )
        if failure is not None:
            return failure
        return Ok(author)

    async def delete(self, db: AsyncSession, author_id: int) -> Outcome[bool]:
        try:
            # Load the books too: the FK cascade removes them with the author.
            author = await self._repo.get_author_with_books(db, author_id)
            if author is None or not await self._repo.delete_author(db, author_id):
                await db.rollback()
                return NotFoundError(self.entity, author_id)
            await db.commit()
        except STORE_ERRORS as exc:
            return await self._write_failed(db, "delete", author_id, exc)

        keys = [AUTHORS_ALL_KEY, author_key(author_id), author_books_key(author_id)]
        if author.books:
            keys.append(BOOKS_ALL_KEY)
            keys.extend(book_key(book.id) for book in author.books)
        failure = await self._invalidate("delete", author_id, *keys)
        if failure is not None:
            return failure
        return Ok(True)
