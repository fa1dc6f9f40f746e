"""Author cache namespace — key builders and payload shapes.

  authors.all         full author collection
  author.{id}         single author
  author.books.{id}   author joined with its books

author.books.{id} embeds book rows, so book writes must delete it too.
"""

from src.catalog_author.domain.models import Author, AuthorWithBooks
from src.catalog_common.codec import shape

AUTHORS_ALL_KEY = "authors.all"


def author_key(author_id: int) -> str:
    return f"author.{author_id}"


def author_books_key(author_id: int) -> str:
    return f"author.books.{author_id}"


AUTHOR_SHAPE = shape("author", Author)
AUTHOR_LIST_SHAPE = shape("author_list", list[Author])
AUTHOR_WITH_BOOKS_SHAPE = shape("author_with_books", AuthorWithBooks)
