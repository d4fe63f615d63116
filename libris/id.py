import uuid


def new_id() -> uuid.UUID:
    return uuid.uuid4()


def fold_case(value: str | None) -> str | None:
    """The one case-folding rule, used for ISBN keys and for SQLite's ``lower()``."""
    if value is None:
        return None
    return value.lower()


def isbn_key(isbn: str) -> str:
    """Normalized form used for ISBN uniqueness, shared by the services and the unique index."""
    return fold_case(isbn)
