import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from libris.config import LOG_LEVEL
from libris.errors import CatalogError, ValidationError
from libris.logging_config import setup_logging
from libris.routers import authors, books
from libris.services.validation import field_messages

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(field_messages(exc.errors()))
    logger.info("%s %s -> %s: %s", request.method, request.url.path, error.code, error.fields)
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def create_app() -> FastAPI:
    setup_logging(LOG_LEVEL)
    app = FastAPI(title="Libris", version="0.1.0")
    app.include_router(authors.router)
    app.include_router(books.router)
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    return app


app = create_app()
