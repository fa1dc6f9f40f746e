"""Book cache namespace — key builders and payload shapes.

  books.all   full book collection
  book.{id}   single book
"""

from src.catalog_book.domain.models import Book
from src.catalog_common.codec import shape

BOOKS_ALL_KEY = "books.all"


def book_key(book_id: int) -> str:
    return f"book.{book_id}"


BOOK_SHAPE = shape("book", Book)
BOOK_LIST_SHAPE = shape("book_list", list[Book])
