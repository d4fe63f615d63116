"""Persistence contracts for the catalog and their shared SQLAlchemy base.

The services depend only on the ``AuthorStore`` and ``BookStore`` protocols;
``SqlStore`` backs them with an ``AsyncSession``. Stores never commit: the
owning service decides when the unit of work ends.
"""

import uuid
from typing import ClassVar, Generic, Protocol, TypeVar

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from libris.id import new_id
from libris.models import Author, Book
from libris.pagination import Pageable
from libris.schemas.page import Page

ModelT = TypeVar("ModelT", Author, Book)


class AuthorStore(Protocol):
    sort_fields: tuple[str, ...]

    async def find_by_id(self, author_id: uuid.UUID) -> Author | None: ...

    async def find_all(self, pageable: Pageable) -> Page: ...

    async def find_by_name_containing_ignore_case(self, name: str, pageable: Pageable) -> Page: ...

    async def exists_by_id(self, author_id: uuid.UUID) -> bool: ...

    async def has_books(self, author_id: uuid.UUID) -> bool: ...

    async def save(self, author: Author) -> Author: ...

    async def delete_by_id(self, author_id: uuid.UUID) -> None: ...


class BookStore(Protocol):
    sort_fields: tuple[str, ...]

    async def find_by_id(self, book_id: uuid.UUID) -> Book | None: ...

    async def find_all(self, pageable: Pageable) -> Page: ...

    async def find_by_title_containing_ignore_case(self, title: str, pageable: Pageable) -> Page: ...

    async def find_by_isbn_ignore_case(self, isbn: str) -> Book | None: ...

    async def exists_by_id(self, book_id: uuid.UUID) -> bool: ...

    async def save(self, book: Book) -> Book: ...

    async def delete_by_id(self, book_id: uuid.UUID) -> None: ...


class SqlStore(Generic[ModelT]):
    model: ClassVar[type]
    sort_fields: tuple[str, ...] = ()
    default_sort: ClassVar[str]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entity_id: uuid.UUID) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def find_all(self, pageable: Pageable) -> Page:
        return await self._page(select(self.model), pageable)

    async def exists_by_id(self, entity_id: uuid.UUID) -> bool:
        stmt = select(exists().where(self.model.id == entity_id))
        return bool((await self.session.execute(stmt)).scalar())

    async def save(self, entity: ModelT) -> ModelT:
        if entity.id is None:
            entity.id = new_id()
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        entity = await self.find_by_id(entity_id)
        if entity is not None:
            await self.session.delete(entity)
            await self.session.flush()

    async def _page(self, stmt: Select, pageable: Pageable) -> Page:
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        col = getattr(self.model, pageable.sort or self.default_sort)
        stmt = stmt.order_by(col.desc() if pageable.direction == "desc" else col.asc(), self.model.id)
        stmt = stmt.offset(pageable.offset).limit(pageable.size)
        result = await self.session.execute(stmt)
        return Page.of(list(result.scalars().all()), total, pageable.page, pageable.size)
