"""Pydantic request/response schemas for catalog_book.

All responses are wrapped in ApiResponse at the router layer.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.catalog_book.domain.models import Book, BookDraft


class BookRequest(BaseModel):
    """Body of POST /books and PUT /books/{id} (full replace)."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str
    publish_date: date
    author_id: int = Field(..., gt=0)

    def to_draft(self) -> BookDraft:
        return BookDraft(
            title=self.title,
            description=self.description,
            publish_date=self.publish_date,
            author_id=self.author_id,
        )


class BookOut(BaseModel):
    id: int
    title: str
    description: str
    publish_date: str
    author_id: int
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, b: Book) -> "BookOut":
        return cls(
            id=b.id,
            title=b.title,
            description=b.description,
            publish_date=b.publish_date.isoformat(),
            author_id=b.author_id,
            created_at=b.created_at.isoformat() if b.created_at else None,
            updated_at=b.updated_at.isoformat() if b.updated_at else None,
        )
