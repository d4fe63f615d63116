from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

import pydantic

from libris.errors import ValidationError

RequestT = TypeVar("RequestT", bound=pydantic.BaseModel)

# request locations FastAPI prefixes onto error paths
_LOCATIONS = {"body", "query", "path"}


def field_messages(errors: Sequence[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse pydantic error dicts into one message per field."""
    fields: dict[str, str] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATIONS]
        name = ".".join(loc) or "request"
        msg = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        fields.setdefault(name, msg)
    return fields


def validate_request(model: type[RequestT], data: RequestT | Mapping[str, Any]) -> RequestT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(field_messages(exc.errors())) from exc
