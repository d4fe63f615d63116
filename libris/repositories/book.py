from sqlalchemy import select

from libris.id import isbn_key
from libris.models import Book
from libris.pagination import Pageable
from libris.repositories.base import SqlStore
from libris.schemas.page import Page


class SqlBookStore(SqlStore[Book]):
    model = Book
    sort_fields = ("title", "isbn")
    default_sort = "title"

    async def find_by_title_containing_ignore_case(self, title: str, pageable: Pageable) -> Page:
        stmt = select(Book).where(Book.title.icontains(title, autoescape=True))
        return await self._page(stmt, pageable)

    async def find_by_isbn_ignore_case(self, isbn: str) -> Book | None:
        result = await self.session.execute(select(Book).where(Book.isbn_key == isbn_key(isbn)))
        return result.scalar_one_or_none()

    async def save(self, book: Book) -> Book:
        book.isbn_key = isbn_key(book.isbn)
        return await super().save(book)
