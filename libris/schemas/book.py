import uuid

from pydantic import BaseModel, ConfigDict, field_validator

from libris.schemas.author import AuthorResponse

TITLE_MIN_LENGTH, TITLE_MAX_LENGTH = 2, 150
ISBN_MIN_LENGTH, ISBN_MAX_LENGTH = 10, 20


class BookRequest(BaseModel):
    title: str
    author_id: uuid.UUID
    isbn: str

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Book title cannot be blank")
        if not TITLE_MIN_LENGTH <= len(value) <= TITLE_MAX_LENGTH:
            raise ValueError(
                f"Book title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
            )
        return value

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ISBN cannot be blank")
        if not ISBN_MIN_LENGTH <= len(value) <= ISBN_MAX_LENGTH:
            raise ValueError(f"ISBN must be between {ISBN_MIN_LENGTH} and {ISBN_MAX_LENGTH} characters")
        return value


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    author: AuthorResponse
    isbn: str
