"""Book operations and the catalog's cross-entity rules.

A book always points at an existing author, and no two books share an ISBN
once both are lower-cased. The ISBN lookup here is a pre-check that gives a
precise error; the unique index on ``books.isbn_key`` is what holds the rule
when two writers race, and its violation surfaces as the same
``DuplicateResource``.
"""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from libris.errors import DuplicateResource, NotFound
from libris.mappers import book_to_entity, book_to_response
from libris.models import Author, Book
from libris.pagination import Pageable
from libris.repositories import AuthorStore, BookStore
from libris.schemas.book import BookRequest, BookResponse
from libris.schemas.page import Page
from libris.services.base import unit_of_work
from libris.services.validation import validate_request

logger = logging.getLogger(__name__)


class BookService:
    def __init__(self, session: AsyncSession, books: BookStore, authors: AuthorStore) -> None:
        self.session = session
        self.books = books
        self.authors = authors

    async def find_all(self, title: str | None = None, pageable: Pageable | None = None) -> Page:
        pageable = pageable or Pageable()
        pageable.check_sort(self.books.sort_fields)
        if title and title.strip():
            page = await self.books.find_by_title_containing_ignore_case(title, pageable)
        else:
            page = await self.books.find_all(pageable)
        return page.map(book_to_response)

    async def find_by_id(self, book_id: uuid.UUID) -> BookResponse:
        return book_to_response(await self._get_book(book_id))

    async def create(self, data: BookRequest | Mapping[str, Any]) -> BookResponse:
        request = validate_request(BookRequest, data)
        try:
            async with unit_of_work(self.session):
                await self._check_isbn_available(request.isbn)
                author = await self._get_author(request.author_id)
                book = book_to_entity(request)
                book.author_id = author.id
                book.author = author
                book = await self.books.save(book)
        except IntegrityError as exc:
            raise self._translate_integrity_error(exc, request) from exc
        logger.info("Created book %s (isbn %s) for author %s", book.id, book.isbn, author.id)
        return book_to_response(book)

    async def update(self, book_id: uuid.UUID, data: BookRequest | Mapping[str, Any]) -> BookResponse:
        request = validate_request(BookRequest, data)
        try:
            async with unit_of_work(self.session):
                book = await self._get_book(book_id)
                await self._check_isbn_available(request.isbn, current_id=book.id)
                author = await self._get_author(request.author_id)
                book.title = request.title
                book.isbn = request.isbn
                book.author_id = author.id
                book.author = author
                book = await self.books.save(book)
        except IntegrityError as exc:
            raise self._translate_integrity_error(exc, request) from exc
        logger.info("Updated book %s", book.id)
        return book_to_response(book)

    async def delete(self, book_id: uuid.UUID) -> None:
        async with unit_of_work(self.session):
            if not await self.books.exists_by_id(book_id):
                raise NotFound("Book", book_id)
            await self.books.delete_by_id(book_id)
        logger.info("Deleted book %s", book_id)

    async def _get_book(self, book_id: uuid.UUID) -> Book:
        book = await self.books.find_by_id(book_id)
        if book is None:
            raise NotFound("Book", book_id)
        return book

    async def _get_author(self, author_id: uuid.UUID) -> Author:
        author = await self.authors.find_by_id(author_id)
        if author is None:
            raise NotFound("Author", author_id)
        return author

    async def _check_isbn_available(self, isbn: str, current_id: uuid.UUID | None = None) -> None:
        existing = await self.books.find_by_isbn_ignore_case(isbn)
        if existing is not None and existing.id != current_id:
            logger.warning("Rejected duplicate ISBN %s (held by book %s)", isbn, existing.id)
            raise DuplicateResource(isbn)

    @staticmethod
    def _translate_integrity_error(exc: IntegrityError, request: BookRequest) -> Exception:
        if "isbn_key" in str(exc.orig):
            return DuplicateResource(request.isbn)
        # the author vanished between lookup and commit
        return NotFound("Author", request.author_id)
