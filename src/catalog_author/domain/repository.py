"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.catalog_author.domain.models import Author, AuthorDraft, AuthorWithBooks


class AuthorRepositoryProtocol(Protocol):
    async def list_authors(self, db: AsyncSession) -> list[Author]: ...

    async def get_author_by_id(
        self, db: AsyncSession, author_id: int
    ) -> Author | None: ...

    async def get_author_with_books(
        self, db: AsyncSession, author_id: int
    ) -> AuthorWithBooks | None: ...

    async def insert_author(self, db: AsyncSession, draft: AuthorDraft) -> Author: ...

    async def update_author(
        self, db: AsyncSession, author_id: int, draft: AuthorDraft
    ) -> Author | None: ...

    async def delete_author(self, db: AsyncSession, author_id: int) -> bool: ...
