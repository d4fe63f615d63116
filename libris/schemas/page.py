import math
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
U = TypeVar("U")


class Page(BaseModel, Generic[T]):
    content: list[T]
    total_elements: int
    total_pages: int
    page: int
    size: int

    @classmethod
    def of(cls, content: list, total_elements: int, page: int, size: int) -> "Page":
        return cls(
            content=content,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / size) if size else 0,
            page=page,
            size=size,
        )

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[fn(item) for item in self.content],
            total_elements=self.total_elements,
            total_pages=self.total_pages,
            page=self.page,
            size=self.size,
        )
