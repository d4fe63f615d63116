import uuid

from fastapi import APIRouter, Depends, Query

from libris.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from libris.dependencies import get_book_service
from libris.pagination import MAX_PAGE, Pageable
from libris.schemas.book import BookRequest, BookResponse
from libris.schemas.error import error_responses
from libris.schemas.page import Page
from libris.services.book_service import BookService

router = APIRouter(prefix="/api/books", tags=["books"])

INVALID = "Invalid input data"
NOT_FOUND = "Book not found"
DUPLICATE_ISBN = "ISBN already exists"


@router.get(
    "",
    response_model=Page[BookResponse],
    summary="Find all books",
    description="Returns a paginated list of books. Can be filtered by title.",
    responses=error_responses({400: "Invalid paging or sort parameters"}),
)
async def list_books(
    title: str | None = Query(None, description="Keep books whose title contains this (case-insensitive)"),
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: str | None = Query(None, description="title or isbn, with optional direction, e.g. title,desc"),
    service: BookService = Depends(get_book_service),
):
    return await service.find_all(title, Pageable.parse(page, size, sort))


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Find book by ID",
    responses=error_responses({400: INVALID, 404: NOT_FOUND}),
)
async def get_book(book_id: uuid.UUID, service: BookService = Depends(get_book_service)):
    return await service.find_by_id(book_id)


@router.post(
    "",
    response_model=BookResponse,
    status_code=201,
    summary="Create a new book",
    description="Creates a new book and associates it with an existing author.",
    responses=error_responses({400: INVALID, 404: "Author not found", 409: DUPLICATE_ISBN}),
)
async def create_book(data: BookRequest, service: BookService = Depends(get_book_service)):
    return await service.create(data)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update an existing book",
    responses=error_responses({400: INVALID, 404: "Book or author not found", 409: DUPLICATE_ISBN}),
)
async def update_book(book_id: uuid.UUID, data: BookRequest, service: BookService = Depends(get_book_service)):
    return await service.update(book_id, data)


@router.delete(
    "/{book_id}",
    status_code=204,
    summary="Delete a book",
    responses=error_responses({400: INVALID, 404: NOT_FOUND}),
)
async def delete_book(book_id: uuid.UUID, service: BookService = Depends(get_book_service)):
    await service.delete(book_id)
