"""Field copying between request/response shapes and ORM entities.

Every mapper passes ``None`` through unchanged.
"""

from libris.models import Author, Book
from libris.schemas.author import AuthorRequest, AuthorResponse
from libris.schemas.book import BookRequest, BookResponse


def author_to_entity(data: AuthorRequest | None) -> Author | None:
    if data is None:
        return None
    return Author(name=data.name)


def author_to_response(author: Author | None) -> AuthorResponse | None:
    if author is None:
        return None
    return AuthorResponse(id=author.id, name=author.name)


def book_to_entity(data: BookRequest | None) -> Book | None:
    # the author is bound by the service once it has been resolved
    if data is None:
        return None
    return Book(title=data.title, isbn=data.isbn)


def book_to_response(book: Book | None) -> BookResponse | None:
    if book is None:
        return None
    return BookResponse(
        id=book.id,
        title=book.title,
        author=author_to_response(book.author),
        isbn=book.isbn,
    )
