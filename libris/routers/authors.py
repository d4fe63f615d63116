import uuid

from fastapi import APIRouter, Depends, Query

from libris.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from libris.dependencies import get_author_service
from libris.pagination import MAX_PAGE, Pageable
from libris.schemas.author import AuthorRequest, AuthorResponse
from libris.schemas.error import error_responses
from libris.schemas.page import Page
from libris.services.author_service import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])

INVALID = "Invalid input data"
NOT_FOUND = "Author not found"


@router.get(
    "",
    response_model=Page[AuthorResponse],
    summary="Find all authors",
    description="Returns a paginated list of authors. Can be filtered by name.",
    responses=error_responses({400: "Invalid paging or sort parameters"}),
)
async def list_authors(
    name: str | None = Query(None, description="Keep authors whose name contains this (case-insensitive)"),
    page: int = Query(0, ge=0, le=MAX_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: str | None = Query(None, description="Sort field with optional direction, e.g. name,desc"),
    service: AuthorService = Depends(get_author_service),
):
    return await service.find_all(name, Pageable.parse(page, size, sort))


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Find author by ID",
    responses=error_responses({400: INVALID, 404: NOT_FOUND}),
)
async def get_author(author_id: uuid.UUID, service: AuthorService = Depends(get_author_service)):
    return await service.find_by_id(author_id)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=201,
    summary="Create a new author",
    responses=error_responses({400: INVALID}),
)
async def create_author(data: AuthorRequest, service: AuthorService = Depends(get_author_service)):
    return await service.create(data)


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an existing author",
    description="Updates the name of an existing author by its ID.",
    responses=error_responses({400: INVALID, 404: NOT_FOUND}),
)
async def update_author(
    author_id: uuid.UUID, data: AuthorRequest, service: AuthorService = Depends(get_author_service)
):
    return await service.update(author_id, data)


@router.delete(
    "/{author_id}",
    status_code=204,
    summary="Delete an author",
    description="Authors still referenced by books cannot be deleted.",
    responses=error_responses({400: INVALID, 404: NOT_FOUND, 409: "Author is still referenced by books"}),
)
async def delete_author(author_id: uuid.UUID, service: AuthorService = Depends(get_author_service)):
    await service.delete(author_id)
