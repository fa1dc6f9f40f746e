"""Domain models for catalog_author — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass, field
from datetime import date, datetime

from src.catalog_book.domain.models import Book


@dataclass
class Author:
    id: int
    name: str
    bio: str
    birth_date: date
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class AuthorWithBooks:
    """Author joined with every book that references it, ordered by book id."""

    id: int
    name: str
    bio: str
    birth_date: date
    created_at: datetime | None = None
    updated_at: datetime | None = None
    books: list[Book] = field(default_factory=list)


@dataclass
class AuthorDraft:
    """Writable fields of an author; input to insert and full-replace update."""

    name: str
    bio: str
    birth_date: date
