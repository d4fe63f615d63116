import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from libris.errors import NotFound, ResourceInUse
from libris.mappers import author_to_entity, author_to_response
from libris.models import Author
from libris.pagination import Pageable
from libris.repositories import AuthorStore
from libris.schemas.author import AuthorRequest, AuthorResponse
from libris.schemas.page import Page
from libris.services.base import unit_of_work
from libris.services.validation import validate_request

logger = logging.getLogger(__name__)


class AuthorService:
    def __init__(self, session: AsyncSession, authors: AuthorStore) -> None:
        self.session = session
        self.authors = authors

    async def find_all(self, name: str | None = None, pageable: Pageable | None = None) -> Page:
        """Page through authors, optionally keeping only names containing ``name`` (any case)."""
        pageable = pageable or Pageable()
        pageable.check_sort(self.authors.sort_fields)
        if name and name.strip():
            page = await self.authors.find_by_name_containing_ignore_case(name, pageable)
        else:
            page = await self.authors.find_all(pageable)
        return page.map(author_to_response)

    async def find_by_id(self, author_id: uuid.UUID) -> AuthorResponse:
        return author_to_response(await self._get_author(author_id))

    async def create(self, data: AuthorRequest | Mapping[str, Any]) -> AuthorResponse:
        request = validate_request(AuthorRequest, data)
        async with unit_of_work(self.session):
            author = await self.authors.save(author_to_entity(request))
        logger.info("Created author %s", author.id)
        return author_to_response(author)

    async def update(self, author_id: uuid.UUID, data: AuthorRequest | Mapping[str, Any]) -> AuthorResponse:
        request = validate_request(AuthorRequest, data)
        async with unit_of_work(self.session):
            author = await self._get_author(author_id)
            author.name = request.name
            author = await self.authors.save(author)
        logger.info("Updated author %s", author.id)
        return author_to_response(author)

    async def delete(self, author_id: uuid.UUID) -> None:
        """Remove an author. Authors still referenced by books are kept."""
        try:
            async with unit_of_work(self.session):
                if not await self.authors.exists_by_id(author_id):
                    raise NotFound("Author", author_id)
                if await self.authors.has_books(author_id):
                    logger.warning("Refusing to delete author %s: still referenced by books", author_id)
                    raise ResourceInUse("Author", author_id)
                await self.authors.delete_by_id(author_id)
        except IntegrityError as exc:
            # a book was bound to this author after the reference check
            raise ResourceInUse("Author", author_id) from exc
        logger.info("Deleted author %s", author_id)

    async def _get_author(self, author_id: uuid.UUID) -> Author:
        author = await self.authors.find_by_id(author_id)
        if author is None:
            raise NotFound("Author", author_id)
        return author
