"""FastAPI providers wiring stores and services onto the request's session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from libris.database import get_session
from libris.repositories import SqlAuthorStore, SqlBookStore
from libris.services.author_service import AuthorService
from libris.services.book_service import BookService


def get_author_service(session: AsyncSession = Depends(get_session)) -> AuthorService:
    return AuthorService(session, SqlAuthorStore(session))


def get_book_service(session: AsyncSession = Depends(get_session)) -> BookService:
    return BookService(session, SqlBookStore(session), SqlAuthorStore(session))
