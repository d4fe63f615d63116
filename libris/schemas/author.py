import uuid

from pydantic import BaseModel, ConfigDict, field_validator

NAME_MAX_LENGTH = 255


class AuthorRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Author name is required")
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError(f"Author name must not exceed {NAME_MAX_LENGTH} characters")
        return value


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
