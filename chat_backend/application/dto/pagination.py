"""Pagination result and its API representation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from chat_backend.application.dto.base import CamelModel

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A window over an ordered collection. offset/limit echo the request."""

    data: list[T]
    offset: int
    limit: int
    total: int


class PaginationDTO(CamelModel):
    offset: int
    limit: int
    total: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationDTO":
        return cls(offset=page.offset, limit=page.limit, total=page.total)
