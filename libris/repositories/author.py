import uuid

from sqlalchemy import exists, select

from libris.models import Author, Book
from libris.pagination import Pageable
from libris.repositories.base import SqlStore
from libris.schemas.page import Page


class SqlAuthorStore(SqlStore[Author]):
    model = Author
    sort_fields = ("name",)
    default_sort = "name"

    async def find_by_name_containing_ignore_case(self, name: str, pageable: Pageable) -> Page:
        stmt = select(Author).where(Author.name.icontains(name, autoescape=True))
        return await self._page(stmt, pageable)

    async def has_books(self, author_id: uuid.UUID) -> bool:
        stmt = select(exists().where(Book.author_id == author_id))
        return bool((await self.session.execute(stmt)).scalar())
