"""Pydantic request/response schemas for catalog_author.

All responses are wrapped in ApiResponse at the router layer.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.catalog_author.domain.models import Author, AuthorDraft, AuthorWithBooks
from src.catalog_book.application.schemas import BookOut


class AuthorRequest(BaseModel):
    """Body of POST /authors and PUT /authors/{id} (full replace)."""

    name: str = Field(..., min_length=1, max_length=100)
    bio: str
    birth_date: date

    def to_draft(self) -> AuthorDraft:
        return AuthorDraft(name=self.name, bio=self.bio, birth_date=self.birth_date)


class AuthorOut(BaseModel):
    id: int
    name: str
    bio: str
    birth_date: str
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, a: Author | AuthorWithBooks) -> "AuthorOut":
        return cls(
            id=a.id,
            name=a.name,
            bio=a.bio,
            birth_date=a.birth_date.isoformat(),
            created_at=a.created_at.isoformat() if a.created_at else None,
            updated_at=a.updated_at.isoformat() if a.updated_at else None,
        )


class AuthorWithBooksOut(AuthorOut):
    books: list[BookOut]

    @classmethod
    def from_joined(cls, a: AuthorWithBooks) -> "AuthorWithBooksOut":
        return cls(
            **AuthorOut.from_domain(a).model_dump(),
            books=[BookOut.from_domain(b) for b in a.books],
        )
