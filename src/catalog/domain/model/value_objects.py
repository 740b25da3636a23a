"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from catalog.domain.exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R")


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> SortDirection:
        """Only the literal ``"asc"`` sorts ascending; anything else is descending."""
        return cls.ASC if raw == "asc" else cls.DESC


class Uniqueness(Enum):
    """Outcome of a title uniqueness check."""

    UNIQUE = "OK"
    DUPLICATE = "Duplicate"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PageRequest:
    """A zero-based page of a given size, with an optional sort.

    ``page_index`` is what the store understands; ``offset`` is the
    number of rows skipped before the page starts.
    """

    page_index: int
    size: int
    sort_field: str | None = None
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        if self.page_index < 0:
            raise ValidationError(
                f"Page index cannot be negative, got {self.page_index}"
            )
        if self.size <= 0:
            raise ValidationError(f"Page size must be positive, got {self.size}")

    @property
    def offset(self) -> int:
        return self.page_index * self.size

    @property
    def page_number(self) -> int:
        """The 1-based page number callers asked for."""
        return self.page_index + 1

    @property
    def is_sorted(self) -> bool:
        return self.sort_field is not None


@dataclass
class Page(Generic[T]):
    """One page of results plus the metadata needed to render a pager."""

    items: list[T]
    total: int
    page_request: PageRequest = field(compare=False)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def number(self) -> int:
        return self.page_request.page_number

    @property
    def size(self) -> int:
        return self.page_request.size

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    def map(self, fn: Callable[[T], R]) -> Page[R]:
        return Page([fn(item) for item in self.items], self.total, self.page_request)
