"""Typed failures raised by the catalog services.

Services raise these; the HTTP layer maps them onto responses through the
handlers registered in ``libris.app``. Every error carries a machine-readable
``code`` and the HTTP status the API answers with.
"""

import uuid


class CatalogError(Exception):
    """Base exception for all catalog failures."""

    code = "CATALOG_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class ValidationError(CatalogError):
    """Input failed field constraints. ``fields`` maps each field to its message."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, fields: dict[str, str]):
        names = ", ".join(sorted(fields))
        super().__init__(f"Invalid value for: {names}")
        self.fields = fields

    def to_response(self) -> dict:
        return {**super().to_response(), "errors": self.fields}


class NotFound(CatalogError):
    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, resource: str, resource_id: uuid.UUID):
        super().__init__(f"{resource} not found with id: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class DuplicateResource(CatalogError):
    code = "DUPLICATE_RESOURCE"
    http_status = 409

    def __init__(self, isbn: str):
        super().__init__(f"A book with ISBN {isbn} already exists.")
        self.isbn = isbn


class ResourceInUse(CatalogError):
    """An Author cannot be removed while Books still reference it."""

    code = "RESOURCE_IN_USE"
    http_status = 409

    def __init__(self, resource: str, resource_id: uuid.UUID):
        super().__init__(f"{resource} with id: {resource_id} is still referenced by existing books")
        self.resource = resource
        self.resource_id = resource_id
