"""Domain models for catalog_book — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Book:
    id: int
    title: str
    description: str
    publish_date: date
    author_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class BookDraft:
    """Writable fields of a book; input to insert and full-replace update."""

    title: str
    description: str
    publish_date: date
    author_id: int
