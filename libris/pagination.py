"""Pagination and sorting parameters shared by the stores and services."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from libris.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from libris.errors import ValidationError

Direction = Literal["asc", "desc"]

# keeps page * size inside a signed 64-bit OFFSET
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE - 1


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: str | None = None
    direction: Direction = "asc"

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def parse(cls, page: int = 0, size: int = DEFAULT_PAGE_SIZE, sort: str | None = None) -> "Pageable":
        """Build a Pageable from raw query values.

        ``sort`` takes the form ``field`` or ``field,direction``; the direction
        defaults to ascending.
        """
        errors = {}
        if not 0 <= page <= MAX_PAGE:
            errors["page"] = f"Page index must be between 0 and {MAX_PAGE}"
        if not 1 <= size <= MAX_PAGE_SIZE:
            errors["size"] = f"Page size must be between 1 and {MAX_PAGE_SIZE}"

        field, direction = None, "asc"
        if sort and sort.strip():
            field, _, raw_direction = sort.partition(",")
            field = field.strip()
            direction = raw_direction.strip().lower() or "asc"
            if direction not in ("asc", "desc"):
                errors["sort"] = "Sort direction must be 'asc' or 'desc'"

        if errors:
            raise ValidationError(errors)
        return cls(page=page, size=size, sort=field or None, direction=direction)

    def check_sort(self, allowed: Iterable[str]) -> None:
        allowed = tuple(allowed)
        if self.sort is not None and self.sort not in allowed:
            raise ValidationError({"sort": f"Cannot sort by '{self.sort}'; expected one of: {', '.join(allowed)}"})
