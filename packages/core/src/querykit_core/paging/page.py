"""
Page window and page result value objects.

``PageRequest`` describes *which* slice of the matching rows a caller wants;
``PageResult`` carries that slice together with the total number of matching
rows across all pages.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ..primitives.exceptions import InvalidRequestError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

T = TypeVar("T")
U = TypeVar("U")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PageRequest:
    """
    Immutable offset/limit window with optional ordering.

    Attributes:
        offset: Zero-based position of the first item.
        limit: Maximum number of items in the page (must be positive).
        order_by: Field ordering.
            Prefix with ``-`` for descending, e.g. ``("-age", "username")``.

    Raises:
        InvalidRequestError: On a negative offset or a non-positive limit.
    """

    offset: int = 0
    limit: int = 20
    order_by: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        errors: dict[str, list[str]] = {}
        if not _is_int(self.offset):
            errors["offset"] = ["must be an integer"]
        elif self.offset < 0:
            errors["offset"] = ["must be greater than or equal to 0"]
        if not _is_int(self.limit):
            errors["limit"] = ["must be an integer"]
        elif self.limit <= 0:
            errors["limit"] = ["must be greater than 0"]
        if errors:
            raise InvalidRequestError(errors)
        object.__setattr__(self, "order_by", tuple(self.order_by))

    @classmethod
    def of(cls, page: int, size: int, *order_by: str) -> PageRequest:
        """Build a request from a zero-based page number and a page size."""
        if not _is_int(page) or page < 0:
            raise InvalidRequestError({"page": ["must be greater than or equal to 0"]})
        if not _is_int(size) or size <= 0:
            raise InvalidRequestError({"size": ["must be greater than 0"]})
        return cls(offset=page * size, limit=size, order_by=order_by)

    @property
    def page_number(self) -> int:
        """Zero-based page number (offsets not aligned to the limit round down)."""
        return self.offset // self.limit

    def next(self) -> PageRequest:
        return PageRequest(self.offset + self.limit, self.limit, self.order_by)

    def previous_or_first(self) -> PageRequest:
        return PageRequest(max(0, self.offset - self.limit), self.limit, self.order_by)

    def first(self) -> PageRequest:
        return PageRequest(0, self.limit, self.order_by)

    def with_ordering(self, *fields: str) -> PageRequest:
        """Return a copy with updated ordering."""
        return PageRequest(self.offset, self.limit, fields)


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """
    One page of items plus the total number of matching items.

    ``total`` is the count *before* paging was applied. When ``items`` is
    non-empty, ``total >= request.offset + len(items)`` holds.
    """

    items: list[T]
    total: int
    request: PageRequest

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    # -- metadata -----------------------------------------------------------

    @property
    def offset(self) -> int:
        return self.request.offset

    @property
    def limit(self) -> int:
        return self.request.limit

    @property
    def page_number(self) -> int:
        return self.request.page_number

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.request.limit)

    @property
    def has_next(self) -> bool:
        return self.request.offset + len(self.items) < self.total

    @property
    def has_previous(self) -> bool:
        return self.request.offset > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    # -- convenience --------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> PageResult[U]:
        """Return a page of transformed items with the same total and request."""
        return PageResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            request=self.request,
        )
