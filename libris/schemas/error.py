from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx answer, see ``libris.errors.CatalogError.to_response``."""

    detail: str
    code: str
    errors: dict[str, str] | None = None


def error_responses(descriptions: dict[int, str]) -> dict[int, dict]:
    """OpenAPI ``responses`` entries documenting ErrorResponse bodies."""
    return {status: {"model": ErrorResponse, "description": text} for status, text in descriptions.items()}
